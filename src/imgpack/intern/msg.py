import builtins
import sys
import traceback
from typing import Dict, Any, Callable

import imgpack.intern.dbc as dbc


print_exception: bool = False
"""Flag to control whether to print the stack trace of unexpected exceptions."""

messages_en: Dict[str, str] = {
    "ACCESS_DENIED": "access to \"{name}\" denied. Please check your permissions.",
    "CONFIG_ERROR": "the configuration file \"{path}\" could not be loaded: \"{reason}\"",
    "INVALID_PAYLOAD": "the payload of \"{name}\" is no valid base85 text: \"{reason}\"",
    "NOT_FOUND": "the {kind} was not found. Please check \"{name}\" and try again.",
    "READ_FAILED": "file \"{path}\" could not be read: \"{reason}\"",
    "SYSTEM_ERROR": "internal error. Details: \"{details}\".",
    "UNPROCESSED_EXCEPTION": "an unprocessed exception of type \"{exception_type}\" occurred: \"{details}\".",
    "VALIDATION_ERROR": "error when validating \"{definition_of}\": \"{error}\".",
    "WRITE_FAILED": "\"{path}\" could not be written: \"{reason}\"",

    "CONFIG_LOADED": "configuration loaded from \"{path}\"",
    "DOCUMENT_WRITTEN": "{kind} with {number} entries written to \"{path}\"",
    "ENTRY_SKIPPED": "WARNING: skipped \"{path}\" during traversal: {reason}",
    "FILE_ENCODED": "encoded \"{path}\" as \"{name}\", digest {digest}",
    "RUN_ABORTED": "run aborted. {message_text}",
    "RUN_FINISHED": "{number} file(s) with extension \"{extension}\" found below \"{input_root}\"",
    "SCAN_STARTED": "scanning \"{input_root}\" for \"*.{extension}\"",
}


def print(msgkey_and_params: Dict[str, Any], prefix_with_error: bool = False) -> None:
    """
    Print a message text as defined by a message key. The message dictionary contains the message key and its parameters.
    Error messages are prefixed and written to stderr, all others go to stdout.

    Args:
        msgkey_and_params (dict): Message key and its parameters.
        prefix_with_error (bool, optional): If True, prefix the message with "*** ERROR ***". Default is False.
    """
    msgkey_and_params.setdefault("category", "USER_ERROR")
    if prefix_with_error:
        builtins.print(f"*** ERROR *** {get_message_text(msgkey_and_params)}", file=sys.stderr)
    else:
        builtins.print(get_message_text(msgkey_and_params))


def log(log_function: Callable[[str], None], msgkey_and_params: Dict[str, Any]) -> None:
    """
    Log a message text as defined by a message key, e.g. msg.log(logger.info, {"msg": "SCAN_STARTED", ...}).

    Args:
        log_function (callable): The bound logger method to use.
        msgkey_and_params (dict): Message key and its parameters.
    """
    msgkey_and_params.setdefault("category", "USER_ERROR")
    log_function(get_message_text(msgkey_and_params))


def get_message_text(msgkey_and_params: Dict[str, Any]) -> str:
    """
    Create a message text from a dictionary. The dictionary contains the message key and its parameters.

    Args:
        msgkey_and_params (dict): Message key and its parameters.

    Returns:
        str: The formatted message.
    """
    if not isinstance(msgkey_and_params, dict):
        return error_in_message_handling("message is no dict")
    if msgkey_and_params.get("category", "SYSTEM_ERROR") == "USER_ERROR":
        msg_context = ""
    else:
        msg_context = " !!! This is a system error. Please contact the developer team !!!"
    message_key = msgkey_and_params.get("msg", "--NO_MESSAGE_KEY--")
    message = messages_en.get(message_key, "--NO_MESSAGE--")
    if message == "--NO_MESSAGE--":
        return get_message_text({"msg": "SYSTEM_ERROR", "details": f"message key \"{message_key}\" not found"})
    try:
        return message.format(**msgkey_and_params) + msg_context
    except KeyError as e:
        return error_in_message_handling(f"parameter \"{e.args[0]}\" missing for message key \"{message_key}\"")


def get_message_text_for_exception(exception: Exception) -> str:
    """
    Retrieve the error message for a given exception.

    Args:
        exception (Exception): The exception object.

    Returns:
        str: The formatted error message.
    """
    if isinstance(exception, dbc.ImgpackException):
        return get_message_text(exception.error_description)
    if isinstance(exception, FileNotFoundError):
        return get_message_text({"msg": "NOT_FOUND", "kind": "file", "name": exception.filename, "category": "USER_ERROR"})
    if isinstance(exception, PermissionError):
        return get_message_text({"msg": "ACCESS_DENIED", "name": exception.filename, "category": "USER_ERROR"})
    if isinstance(exception, KeyError):
        details = f"key \"{exception.args[0]}\" not found"
        return get_message_text({"msg": "SYSTEM_ERROR", "details": details, "category": "SYSTEM_ERROR"})
    if isinstance(exception, TypeError):
        details = f"type error: \"{exception.args[0]}\""
        return get_message_text({"msg": "SYSTEM_ERROR", "details": details, "category": "SYSTEM_ERROR"})
    # add more lines before to process more special exceptions
    if print_exception:
        traceback.print_exception(exception)
    return get_message_text({
        "msg": "UNPROCESSED_EXCEPTION",
        "exception_type": type(exception).__name__,
        "details": str(exception),
        "category": "SYSTEM_ERROR"})


def error_in_message_handling(details: str) -> str:
    """
    Handle errors that occur during message processing. Be careful, when changing this: it is used for error processing,
    thus there is a potential for an endless loop :-)

    Args:
        details (str): Indication of the internal error.

    Returns:
        str: A message indicating the internal error.
    """
    if print_exception:
        traceback.print_exc()
    return get_message_text({"msg": "SYSTEM_ERROR", "details": details})
