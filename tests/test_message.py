import logging

import pytest

from syxpack.errors import (
    InvalidIdentifierError,
    MessageTooShortError,
    MissingInitiatorError,
    MissingTerminatorError,
    SysExError,
)
from syxpack.manufacturer import Manufacturer, ManufacturerGroup
from syxpack.message import (
    ManufacturerSpecificMessage,
    Message,
    MessageKind,
    UniversalMessage,
    parse_messages,
    split_messages,
)

TEST_MESSAGES = [
    pytest.param(
        b"\xf0\x7e\x00\x06\x01\xf7",
        UniversalMessage(device_channel=0x00, sub_id1=0x06, sub_id2=0x01),
        id="universal-identity-request",
    ),
    pytest.param(
        b"\xf0\x7f\x7f\x04\x01\x00\x7f\xf7",
        UniversalMessage(
            device_channel=0x7F,
            sub_id1=0x04,
            sub_id2=0x01,
            realtime=True,
            payload=b"\x00\x7f",
        ),
        id="universal-master-volume",
    ),
    pytest.param(
        b"\xf0\x40\x01\x02\xf7",
        ManufacturerSpecificMessage(
            manufacturer=Manufacturer(b"\x40"),
            payload=b"\x01\x02",
        ),
        id="standard",
    ),
    pytest.param(
        b"\xf0\x00\x20\x29\x01\xf7",
        ManufacturerSpecificMessage(
            manufacturer=Manufacturer(b"\x00\x20\x29"),
            payload=b"\x01",
        ),
        id="extended",
    ),
    pytest.param(
        b"\xf0\x00\x20\x29\xf7",
        ManufacturerSpecificMessage(manufacturer=Manufacturer(b"\x00\x20\x29")),
        id="extended-empty-payload",
    ),
    pytest.param(
        b"\xf0\x7d\x01\x02\x03\xf7",
        ManufacturerSpecificMessage(
            manufacturer=Manufacturer.DEVELOPMENT,
            payload=b"\x01\x02\x03",
        ),
        id="development",
    ),
    pytest.param(
        b"\xf0\x45\x10\x20\xf7",
        ManufacturerSpecificMessage(
            manufacturer=Manufacturer(b"\x45"),
            payload=b"\x10\x20",
        ),
        id="unassigned-standard",
    ),
]


@pytest.mark.parametrize("data,message", TEST_MESSAGES)
def test_message_parse_and_encode(data, message):
    decoded = Message.parse(data)
    assert decoded == message
    assert bytes(message) == data
    assert message.encode() == data
    assert message.encoded_length == len(data)


@pytest.mark.parametrize("discriminator", range(0x80))
def test_round_trip_every_discriminator(discriminator):
    data = bytes([0xF0, discriminator, 0x01, 0x02, 0x03, 0x04, 0xF7])
    assert bytes(Message.parse(data)) == data


def test_minimum_universal_message():
    msg = Message.parse([0xF0, 0x7E, 0x00, 0x06, 0x01, 0xF7])
    assert isinstance(msg, UniversalMessage)
    assert msg.payload == b""
    assert msg.device_channel == 0x00
    assert msg.sub_id1 == 0x06
    assert msg.sub_id2 == 0x01
    assert not msg.realtime
    assert msg.kind is MessageKind.UNIVERSAL_NON_REAL_TIME


def test_realtime_kind():
    msg = Message.parse(b"\xf0\x7f\x00\x06\x01\xf7")
    assert msg.realtime
    assert msg.kind is MessageKind.UNIVERSAL_REAL_TIME


def test_standard_manufacturer_message():
    msg = Message.parse(b"\xf0\x40\x01\x02\xf7")
    assert isinstance(msg, ManufacturerSpecificMessage)
    assert msg.kind is MessageKind.MANUFACTURER_SPECIFIC
    assert msg.manufacturer.identifier == b"\x40"
    assert msg.manufacturer.group is ManufacturerGroup.JAPANESE
    assert msg.manufacturer.name == "Kawai Musical Instruments MFG. CO. Ltd"
    assert msg.payload == b"\x01\x02"


def test_extended_manufacturer_message():
    msg = Message.parse(b"\xf0\x00\x20\x29\x01\xf7")
    assert msg.manufacturer.identifier == b"\x00\x20\x29"
    assert msg.manufacturer.name == "Focusrite/Novation"
    assert msg.payload == b"\x01"


def test_unknown_manufacturer_name():
    msg = Message.parse(b"\xf0\x60\x01\x02\xf7")
    assert msg.manufacturer.name == "(unknown)"


@pytest.mark.parametrize(
    "data,error",
    [
        pytest.param(b"", MessageTooShortError, id="empty"),
        pytest.param(b"\xf0\x40", MessageTooShortError, id="two-bytes"),
        pytest.param(b"\xf0\x40\x01\xf7", MessageTooShortError, id="four-bytes"),
        pytest.param(b"\xf0\x7e\x00\x06\xf7", MessageTooShortError, id="short-universal"),
        pytest.param(b"\xf1\x40\x01\x02\xf7", MissingInitiatorError, id="no-initiator"),
        pytest.param(b"\xf0\x40\x01\x02\x03", MissingTerminatorError, id="no-terminator"),
    ],
)
def test_parse_rejects(data, error):
    with pytest.raises(error):
        Message.parse(data)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        Message.parse(b"\xf0\x40")
    assert issubclass(InvalidIdentifierError, SysExError)


def test_parse_with_subclass():
    msg = UniversalMessage.parse(b"\xf0\x7e\x00\x06\x01\xf7")
    assert isinstance(msg, UniversalMessage)

    with pytest.raises(SysExError):
        UniversalMessage.parse(b"\xf0\x40\x01\x02\xf7")


def test_parse_logs(caplog):
    with caplog.at_level(logging.DEBUG, logger="syxpack.message"):
        Message.parse(b"\xf0\x40\x01\x02\xf7")
    assert "Parsed ManufacturerSpecificMessage" in caplog.text


def test_messages_are_immutable():
    msg = Message.parse(b"\xf0\x40\x01\x02\xf7")
    with pytest.raises(AttributeError):
        msg.payload = b""


def test_payload_is_converted_to_bytes():
    msg = ManufacturerSpecificMessage(manufacturer=b"\x41", payload=[0x10, 0x20])
    assert msg.payload == b"\x10\x20"
    assert msg.manufacturer == Manufacturer(b"\x41")
    assert bytes(msg) == b"\xf0\x41\x10\x20\xf7"


def test_universal_header_must_fit_in_a_byte():
    with pytest.raises(ValueError):
        UniversalMessage(device_channel=0x100, sub_id1=0x06, sub_id2=0x01)


def test_universal_str():
    msg = Message.parse(b"\xf0\x7e\x00\x06\x01\xf7")
    assert str(msg) == (
        "Universal System Exclusive Message, Non-Real-time\n"
        "Device Channel = 1\n"
        "Sub Id 1 = 06H, Sub Id 2 = 01H\n"
        "Payload: 0 bytes"
    )


def test_manufacturer_specific_str():
    msg = Message.parse(b"\xf0\x40\x01\x02\xf7")
    assert str(msg) == (
        "Manufacturer: Kawai Musical Instruments MFG. CO. Ltd (id=40H, Japanese)\n"
        "Payload: 2 bytes"
    )


def test_split_messages():
    first = b"\xf0\x7e\x00\x06\x01\xf7"
    second = b"\xf0\x40\x01\x02\xf7"
    assert split_messages(first + second) == [first, second]


def test_split_skips_stray_bytes(caplog):
    msg = b"\xf0\x40\x01\x02\xf7"
    with caplog.at_level(logging.WARNING, logger="syxpack.message"):
        assert split_messages(b"\x01\x02" + msg + b"\x03") == [msg]
    assert "stray bytes" in caplog.text


def test_split_unterminated():
    with pytest.raises(MissingTerminatorError):
        split_messages(b"\xf0\x40\x01\x02\xf7\xf0\x41\x01")


def test_parse_messages():
    [universal, vendor] = parse_messages(
        b"\xf0\x7e\x00\x06\x01\xf7\xf0\x00\x20\x29\x01\xf7"
    )
    assert isinstance(universal, UniversalMessage)
    assert vendor.manufacturer.name == "Focusrite/Novation"
