from enum import IntEnum


class SysEx(IntEnum):
    """Fixed byte values of the System Exclusive framing"""

    EXTENDED = 0x00
    DEVELOPMENT = 0x7D
    UNIVERSAL_NON_REAL_TIME = 0x7E
    UNIVERSAL_REAL_TIME = 0x7F
    INITIATOR = 0xF0
    TERMINATOR = 0xF7


# Shortest buffer accepted as a message
MIN_MESSAGE_LENGTH = 5

# F0 + 7E/7F + device channel + sub id 1 + sub id 2 + F7
MIN_UNIVERSAL_LENGTH = 6
