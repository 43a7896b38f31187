class SysExError(ValueError):
    pass


class InvalidIdentifierError(SysExError):
    def __init__(self, identifier: bytes, reason: str):
        self.identifier = identifier
        super().__init__(f"Invalid manufacturer identifier {identifier.hex(' ')!r}: {reason}")


class MessageTooShortError(SysExError):
    def __init__(self, length: int, minimum: int):
        self.length = length
        self.minimum = minimum
        super().__init__(f"Message too short! ({length} < {minimum})")


class MissingInitiatorError(SysExError):
    def __init__(self, got: int):
        super().__init__(f"Message must start with F0H, got {got:02X}H")


class MissingTerminatorError(SysExError):
    def __init__(self, got: int | None = None):
        if got is None:
            super().__init__("Message must end with F7H, but it is not terminated")
        else:
            super().__init__(f"Message must end with F7H, got {got:02X}H")
