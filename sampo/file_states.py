"""Result states of file system requests."""

from __future__ import annotations

from enum import IntEnum


class FileState(IntEnum):
    OK = 0
    DIRECTORY_FOUND = 1
    DIRECTORY_NOT_FOUND = 2
    DIRECTORY_NOT_ACCESSIBLE = 3
    FILE_FOUND = 4
    FILE_NOT_FOUND = 5
    FILE_NOT_ACCESSIBLE = 6
    IS_NOT_A_FILE = 7
    IS_NOT_A_DIRECTORY = 8
    IS_NOT_ABSOLUTE_PATH = 9
    IS_NOT_RELATIVE_PATH = 10
    CREATED_DIRECTORY = 11
    CREATED_FILE = 12
    UNKNOWN_ERROR = 13
    NOT_IMPLEMENTED = 14