"""Service layer — operations that return ServiceResult.

Services consume the domain types and configuration; they never print.
"""
