"""Spring Boot (exploded JAR) detection and contribution."""

from bootpack.springboot.spring_boot import DEPENDENCY, SpringBoot, launch_command

__all__ = ["DEPENDENCY", "SpringBoot", "launch_command"]
