from ffscope.domain.enums.duration_method import DurationMethod
__all__ = [
    "DurationMethod",
]
