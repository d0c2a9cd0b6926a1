# error handling of imgpack. Errors are described by a message key of intern/msg.py and its parameters.
#
# USER_ERROR: the run can't be completed because of its input or environment. A file found below the
#             input root can't be read (READ_FAILED), the output can't be written (WRITE_FAILED) or the
#             configuration is broken (CONFIG_ERROR, VALIDATION_ERROR).
# SYSTEM_ERROR: a programming error. The message asks to contact the developer team.


class ImgpackException(Exception):
    """
    Exception raised for all errors that abort a run.

    Attributes:
        error_description (dict): The message key ("msg"), its parameters and the "category".
    """

    def __init__(self, error_description: dict):
        super().__init__(error_description)
        self.error_description: dict = error_description

    def __str__(self) -> str:
        return f"ImgpackException: {self.error_description}"


def raise_error(error_description: dict, user_error: bool = True) -> None:
    """
    Raise a user-related or system error, e.g. raise_error({"msg": "CONFIG_ERROR", "path": ..., "reason": ...}).

    Args:
        error_description (dict): The message key and its parameters.
        user_error (bool, optional): True for user errors, False for system errors. Default is True.

    Raises:
        ImgpackException: Always.
    """
    error_description["category"] = "USER_ERROR" if user_error else "SYSTEM_ERROR"
    raise ImgpackException(error_description)


def raise_os_error(message_key: str, path, error: OSError) -> None:
    """
    Raise a user error for a failed file system access, i.e. READ_FAILED or WRITE_FAILED.
    The reason is the text of the operating system, e.g. "Permission denied".

    Args:
        message_key (str): The message key.
        path: The file or directory that was accessed.
        error (OSError): The error raised by the access.

    Raises:
        ImgpackException: Always.
    """
    raise_error({"msg": message_key, "path": str(path), "reason": error.strerror or str(error)})


def assert_true(condition: bool, error_description: dict, user_error: bool = True) -> None:
    """
    Raise a user or system error if the condition is False.
    """
    if not condition:
        raise_error(error_description, user_error)
