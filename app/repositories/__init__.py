"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
CrudRepository provides the generic persistence contract keyed by entity id;
each model repository extends it and adds its lookup-by-name query.
"""
