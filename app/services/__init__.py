"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services map DTOs to entities, call one repository primitive per operation,
and map results back to DTOs or confirmation messages.
"""
