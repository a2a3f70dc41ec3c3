class ReservationRuleError(Exception):
    """Base class for reservation rule errors raised outside the pure guards."""


class UnknownCatalogKeyError(ReservationRuleError):
    def __init__(self, kind: str, key: str) -> None:
        super().__init__(f"unknown {kind}: {key}")
        self.kind = kind
        self.key = key


class UnknownSeatTypeError(UnknownCatalogKeyError):
    def __init__(self, key: str) -> None:
        super().__init__("seat type", key)


class UnknownCourseTypeError(UnknownCatalogKeyError):
    def __init__(self, key: str) -> None:
        super().__init__("course type", key)
