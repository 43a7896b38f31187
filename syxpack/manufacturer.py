from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar

from .constants import SysEx
from .errors import InvalidIdentifierError
from .names import DEFAULT_NAMES, ManufacturerNames

DEVELOPMENT_NAME = "Development / Non-commercial"
UNKNOWN_NAME = "(unknown)"


class ManufacturerKind(Enum):
    DEVELOPMENT = auto()
    STANDARD = auto()
    EXTENDED = auto()


class ManufacturerGroup(Enum):
    NORTH_AMERICAN = auto()
    EUROPEAN_AND_OTHER = auto()
    JAPANESE = auto()
    DEVELOPMENT = auto()

    @property
    def display_name(self) -> str:
        return GROUP_DISPLAY_NAMES[self]


GROUP_DISPLAY_NAMES = {
    ManufacturerGroup.NORTH_AMERICAN: "North American",
    ManufacturerGroup.EUROPEAN_AND_OTHER: "European & other",
    ManufacturerGroup.JAPANESE: "Japanese",
    ManufacturerGroup.DEVELOPMENT: "Development",
}


@dataclass(frozen=True)
class Manufacturer:
    """
    Manufacturer identifier of a System Exclusive message.

    Standard manufacturers use a single byte, extended ones three bytes
    starting with 00H. The single byte 7DH is reserved for development
    and non-commercial use.
    """

    identifier: bytes
    names: ManufacturerNames = field(default=DEFAULT_NAMES, repr=False, compare=False)

    DEVELOPMENT: ClassVar["Manufacturer"]

    def __post_init__(self):
        if isinstance(self.identifier, int):
            raise TypeError("Expected identifier bytes, not a single int")
        identifier = bytes(self.identifier)
        object.__setattr__(self, "identifier", identifier)

        match len(identifier):
            case 0:
                raise InvalidIdentifierError(identifier, "at least one byte is required")
            case 1:
                pass
            case 3:
                if identifier[0] != SysEx.EXTENDED:
                    raise InvalidIdentifierError(
                        identifier, "an extended identifier must start with 00H"
                    )
            case n:
                raise InvalidIdentifierError(
                    identifier, f"expected one or three bytes, got {n}"
                )

    @property
    def kind(self) -> ManufacturerKind:
        if len(self.identifier) == 3:
            return ManufacturerKind.EXTENDED
        if self.identifier[0] == SysEx.DEVELOPMENT:
            return ManufacturerKind.DEVELOPMENT
        return ManufacturerKind.STANDARD

    @property
    def group(self) -> ManufacturerGroup:
        match self.kind:
            case ManufacturerKind.DEVELOPMENT:
                return ManufacturerGroup.DEVELOPMENT

            case ManufacturerKind.STANDARD:
                b = self.identifier[0]
                if 0x01 <= b <= 0x3F:
                    return ManufacturerGroup.NORTH_AMERICAN
                if 0x40 <= b <= 0x5F:
                    return ManufacturerGroup.JAPANESE
                return ManufacturerGroup.EUROPEAN_AND_OTHER

            case ManufacturerKind.EXTENDED:
                b = self.identifier[1]
                if b & 0x40:
                    return ManufacturerGroup.JAPANESE
                if b & 0x20:
                    return ManufacturerGroup.EUROPEAN_AND_OTHER
                return ManufacturerGroup.NORTH_AMERICAN

    @property
    def key(self) -> str:
        """Name table key, like "40" or "00000E" """
        return self.identifier.hex().upper()

    @property
    def name(self) -> str:
        if self.kind is ManufacturerKind.DEVELOPMENT:
            return DEVELOPMENT_NAME
        name = self.names.lookup(self.key)
        return name if name is not None else UNKNOWN_NAME

    @property
    def encoded_length(self) -> int:
        return len(self.identifier)

    def __bytes__(self) -> bytes:
        return self.identifier

    def __str__(self) -> str:
        id_string = "".join(f"{b:02X}H" for b in self.identifier)
        return f"{self.name} (id={id_string}, {self.group.display_name})"


Manufacturer.DEVELOPMENT = Manufacturer(bytes([SysEx.DEVELOPMENT]))
