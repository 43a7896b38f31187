from dataclasses import dataclass, field
from enum import IntFlag


class Include(IntFlag):
    NONE = 0
    OFFSET = 1 << 0
    PRINTABLE = 1 << 1
    MIDDLE_GAP = 1 << 2


@dataclass
class HexDumpConfig:
    bytes_per_line: int = 16  # 0 puts everything on a single line
    uppercase: bool = True
    include: Include = Include.OFFSET | Include.PRINTABLE


def printable(b: int) -> str:
    # C0 and C1 control characters
    if b < 0x20 or 0x7F <= b < 0xA0:
        return "."
    return chr(b)


@dataclass
class HexDump:
    data: bytes
    config: HexDumpConfig = field(default_factory=HexDumpConfig)

    def __post_init__(self):
        self.data = bytes(self.data)
        if self.config.bytes_per_line < 0:
            raise ValueError(
                f"bytes_per_line must be positive or 0, got {self.config.bytes_per_line}"
            )

    def chunks(self) -> list[bytes]:
        n = self.config.bytes_per_line or len(self.data) or 1
        return [self.data[i : i + n] for i in range(0, len(self.data), n)]

    def dump_line(self, chunk: bytes, offset: int) -> str:
        include = self.config.include
        per_line = self.config.bytes_per_line or len(chunk)
        midpoint = per_line // 2
        byte_fmt = "02X" if self.config.uppercase else "02x"
        offset_fmt = "08X" if self.config.uppercase else "08x"

        line = ""
        if include & Include.OFFSET:
            line += f"{offset:{offset_fmt}}: "

        for i in range(per_line):
            line += f"{chunk[i]:{byte_fmt}} " if i < len(chunk) else "   "
            if i + 1 == midpoint and include & Include.MIDDLE_GAP:
                line += " "

        if include & Include.PRINTABLE:
            return line + " " + "".join(map(printable, chunk))
        return line.rstrip()

    def lines(self) -> list[str]:
        res = []
        offset = 0
        for chunk in self.chunks():
            res.append(self.dump_line(chunk, offset))
            offset += len(chunk)
        return res

    def __str__(self) -> str:
        return "\n".join(self.lines())
