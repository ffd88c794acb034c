import enum


class OutputFormat(enum.Enum):
    TS = "ts"
    M3U8 = "m3u8"
