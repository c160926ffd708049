from tobuddy.models.enums import StandardOption

__all__ = [
    "StandardOption",
]
