"""Process exit codes.

The release job's only contract with CI is the exit status, so these values
must remain stable:
- 0: Success, including an intentional skip
- 1: User error (bad command line arguments)
- 2: Configuration error (bad settings file, malformed maintenance plan)
- 3: Process error (git or publish command failed)
- 4: Internal error (a bug in planning or execution)
"""

from enum import IntEnum

__all__ = ["ExitCode"]


class ExitCode(IntEnum):
    OK = 0
    USER_ERROR = 1
    CONFIG_ERROR = 2
    PROCESS_ERROR = 3
    INTERNAL_ERROR = 4

    @property
    def is_success(self) -> bool:
        return self == ExitCode.OK
