"""bootpack: Spring Boot application detection, slicing and dependency inventory."""

__version__ = "0.1.0"
