"""DTO validation package for function requests."""

from .function_request import FunctionRequestDTO

__all__ = ["FunctionRequestDTO"]
