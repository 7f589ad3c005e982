"""Exceptions raised outside the pure transposition/layout core"""


class SongsheetError(Exception):
    """Base class for all songsheet errors"""


class ConfigError(SongsheetError):
    """Invalid configuration file or value"""


class SongFormatError(SongsheetError):
    """Song or setlist record that cannot be loaded"""


class UnknownVariantError(SongsheetError):
    """Content variant name that songs do not have"""
