"""
MIDI System Exclusive messages

Wire layout::

    F0 <identifier> <payload ...> F7

where the identifier is one of

- 7EH / 7FH + device channel + sub id 1 + sub id 2 (universal messages)
- 00H + two bytes (extended manufacturer)
- a single byte (standard manufacturer, or 7DH for development)
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto

from typing_extensions import Self

from .constants import MIN_MESSAGE_LENGTH, MIN_UNIVERSAL_LENGTH, SysEx
from .errors import (
    MessageTooShortError,
    MissingInitiatorError,
    MissingTerminatorError,
    SysExError,
)
from .manufacturer import Manufacturer

logger = logging.getLogger(__name__)


class MessageKind(Enum):
    UNIVERSAL_NON_REAL_TIME = auto()
    UNIVERSAL_REAL_TIME = auto()
    MANUFACTURER_SPECIFIC = auto()


class Message:
    payload: bytes

    @classmethod
    def parse(cls, data: bytes) -> Self:
        data = bytes(data)

        if len(data) < MIN_MESSAGE_LENGTH:
            raise MessageTooShortError(len(data), MIN_MESSAGE_LENGTH)

        if data[0] != SysEx.INITIATOR:
            raise MissingInitiatorError(data[0])

        if data[-1] != SysEx.TERMINATOR:
            raise MissingTerminatorError(data[-1])

        message: Message
        match data[1]:
            case SysEx.DEVELOPMENT:
                message = ManufacturerSpecificMessage(
                    manufacturer=Manufacturer.DEVELOPMENT,
                    payload=data[2:-1],
                )

            case SysEx.UNIVERSAL_NON_REAL_TIME | SysEx.UNIVERSAL_REAL_TIME:
                if len(data) < MIN_UNIVERSAL_LENGTH:
                    raise MessageTooShortError(len(data), MIN_UNIVERSAL_LENGTH)
                message = UniversalMessage(
                    device_channel=data[2],
                    sub_id1=data[3],
                    sub_id2=data[4],
                    realtime=data[1] == SysEx.UNIVERSAL_REAL_TIME,
                    payload=data[5:-1],
                )

            case SysEx.EXTENDED:
                message = ManufacturerSpecificMessage(
                    manufacturer=Manufacturer(data[1:4]),
                    payload=data[4:-1],
                )

            case _:
                message = ManufacturerSpecificMessage(
                    manufacturer=Manufacturer(data[1:2]),
                    payload=data[2:-1],
                )

        if not isinstance(message, cls):
            raise SysExError(
                f"Expected {cls.__name__}, but got {type(message).__name__}"
            )

        logger.debug(f"Parsed {message!r}")
        return message

    @property
    def kind(self) -> MessageKind:
        raise NotImplementedError

    @property
    def encoded_length(self) -> int:
        raise NotImplementedError

    def encode(self) -> bytes:
        return bytes(self)


@dataclass(frozen=True)
class UniversalMessage(Message):
    device_channel: int
    sub_id1: int
    sub_id2: int
    realtime: bool = False
    payload: bytes = b""

    def __post_init__(self):
        for name in ("device_channel", "sub_id1", "sub_id2"):
            if not (0 <= (v := getattr(self, name)) <= 0xFF):
                raise ValueError(f"{name} must fit in a byte, got {v}")
        object.__setattr__(self, "payload", bytes(self.payload))

    @property
    def kind(self) -> MessageKind:
        if self.realtime:
            return MessageKind.UNIVERSAL_REAL_TIME
        return MessageKind.UNIVERSAL_NON_REAL_TIME

    @property
    def encoded_length(self) -> int:
        return 2 + 3 + len(self.payload) + 1

    def __bytes__(self) -> bytes:
        tag = SysEx.UNIVERSAL_REAL_TIME if self.realtime else SysEx.UNIVERSAL_NON_REAL_TIME
        head = bytes(
            [SysEx.INITIATOR, tag, self.device_channel, self.sub_id1, self.sub_id2]
        )
        return head + self.payload + bytes([SysEx.TERMINATOR])

    def __str__(self) -> str:
        return (
            "Universal System Exclusive Message, "
            f"{'Real-time' if self.realtime else 'Non-Real-time'}\n"
            f"Device Channel = {self.device_channel + 1}\n"
            f"Sub Id 1 = {self.sub_id1:02X}H, Sub Id 2 = {self.sub_id2:02X}H\n"
            f"Payload: {len(self.payload)} bytes"
        )


@dataclass(frozen=True)
class ManufacturerSpecificMessage(Message):
    manufacturer: Manufacturer
    payload: bytes = field(default=b"")

    def __post_init__(self):
        if not isinstance(self.manufacturer, Manufacturer):
            object.__setattr__(self, "manufacturer", Manufacturer(self.manufacturer))
        object.__setattr__(self, "payload", bytes(self.payload))

    @property
    def kind(self) -> MessageKind:
        return MessageKind.MANUFACTURER_SPECIFIC

    @property
    def encoded_length(self) -> int:
        return 1 + self.manufacturer.encoded_length + len(self.payload) + 1

    def __bytes__(self) -> bytes:
        return (
            bytes([SysEx.INITIATOR])
            + bytes(self.manufacturer)
            + self.payload
            + bytes([SysEx.TERMINATOR])
        )

    def __str__(self) -> str:
        return (
            f"Manufacturer: {self.manufacturer}\n"
            f"Payload: {len(self.payload)} bytes"
        )


def split_messages(data: bytes) -> list[bytes]:
    """Split concatenated System Exclusive messages (e.g. a .syx file).

    Each message runs from an F0H byte up to and including the next F7H.
    Bytes found between messages are skipped.
    """
    data = bytes(data)
    messages = []
    pos = 0

    while pos < len(data):
        start = data.find(SysEx.INITIATOR, pos)
        if start < 0:
            logger.warning(f"Skipping {len(data) - pos} stray bytes at offset {pos}")
            break
        if start > pos:
            logger.warning(f"Skipping {start - pos} stray bytes at offset {pos}")

        end = data.find(SysEx.TERMINATOR, start)
        if end < 0:
            raise MissingTerminatorError()

        messages.append(data[start : end + 1])
        pos = end + 1

    return messages


def parse_messages(data: bytes) -> list[Message]:
    return [Message.parse(buf) for buf in split_messages(data)]
