# Copyright The Sentiment UDF Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Custom exception and error handling logic.
"""

# Local
from ...config import get_config
from .sentiment_udf_exception import MalformedResponseError

# dictionary mapping string log channel name to error handler instances
# there is only one error handler instance for each log channel name
_error_handlers = {}


def get(log_chan):
    """Get an error handler associated with a given alog log channel.  The same error handler will
    be returned if this function is called repeatedly with the same log channel.

    Args:
        log_chan: alog channel
            An alog log channel.

    Returns:
        ErrorHandler: An instance of `ErrorHandler` associated with `log_chan`
            that can be used to perform various error checks and to raise
            exceptions while also automatically logging appropriate message on
            `log_chan`.
    """
    return _error_handlers.setdefault(log_chan.name, ErrorHandler(log_chan))


def _interpolate(args) -> str:
    if not args:
        return ""
    return args[0] if len(args) == 1 else args[0].format(*args[1:])


class ErrorHandler:
    """An error handler that provides reusable error checking methods and also handles logging
    error messages automatically.  Calling an error handler directly is equivalent to calling
    the `.log_raise` method.
    """

    def __init__(self, log_chan):
        """Create a new error handler that provides reusable error checking and automatic logging.

        Args:
            log_chan: alog channel
                The logging channel that this error handle will use for logging.
        """
        self.log_chan = log_chan

    def _handle_exception_messages(self, log_code, exception):
        """Handle number of exception log messages to avoid overflows"""
        # increment the log message counter attribute or add it if not present
        if hasattr(exception, "_sentiment_udf_nexception_log_messages"):
            exception._sentiment_udf_nexception_log_messages += 1
        else:
            exception._sentiment_udf_nexception_log_messages = 0

        max_messages = get_config().max_exception_log_messages

        if exception._sentiment_udf_nexception_log_messages < max_messages:
            self.log_chan.error(
                log_code, "exception raised: {}".format(repr(exception))
            )

        # if at the limit emit one message stating that we will no longer log
        elif exception._sentiment_udf_nexception_log_messages == max_messages:
            self.log_chan.error(
                log_code,
                "reached MAX_EXCEPTION_LOG_MESSAGES of `{}`, will no log exception `{}`".format(
                    max_messages, repr(exception)
                ),
            )

    def log_raise(self, log_code, exception, root_exception=None):
        """Log an exception with a log code and then raise it.  Using this instead of simply
        using the `raise` keyword with your exceptions will ensure that log message is emitted on
        the `error` level for the log channel associated with this handler.

        Args:
            log_code (str): A log code with format `<SUD12345678E>` where `SUD`
                is the short code for this library, `12345678` is a unique
                eight-digit identifier and `E` is an error level short-code,
                one of `{'fatal': 'F', 'error': 'E', 'warning': 'W', 'info':
                'I', 'trace': 'T', 'debug': 'D'}`.
            exception (Exception): A python exception object or an instance of
                any subclass of `Exception`.
            root_exception: Exception (Optional)
                The exception wrapped by `exception`. It is chained onto the
                raised exception so the original stack trace is preserved.
        Notes:
            The error handler tracks the number of log messages emitted for a given exception and
            stops logging after `max_exception_log_messages` have been logged for a single
            instance.
        """
        self._handle_exception_messages(log_code, exception)

        if root_exception:
            self._handle_exception_messages(log_code, root_exception)
            # raise the exception chained with root_exception
            raise exception from root_exception

        raise exception

    # calling an error handler is equivalent to calling the `.log_raise` method
    __call__ = log_raise

    def type_check(self, log_code, *types, allow_none=False, **variables):
        """Check for acceptable types for a given object.  If the type check fails, a log message
        will be emitted at the error level on the log channel associated with this handler and a
        `TypeError` exception will be raised with an appropriate message.

        Args:
            log_code (str): A log code with format `<SUD90063501E>`
            *types (type or None): Variadic arguments containing all acceptable
                types for `variables`.
            allow_none (bool): If `True` then the values of `variables` are
                allowed to take on the value of `None` without causing the type
                check to fail.
            **variables (object): Variadic keyword arguments to be examined for
                acceptable type.  The name of the variable is used in log and
                error messages while its value is actually checked against
                `types`.

        Examples:
            # this type check verifies that `text` is a string
            > error.type_check('<SUD03761101E>', str, text=text)
        """
        if not get_config().enable_error_checks:
            return

        if not types:
            self(log_code, RuntimeError("invalid type check: no types specified"))

        if not variables:
            self(log_code, RuntimeError("invalid type check: no variables specified"))

        for name, variable in variables.items():
            if allow_none and variable is None:
                continue

            if not isinstance(variable, types):
                type_name = type(variable).__name__
                valid_type_names = tuple(typ.__name__ for typ in types)
                if allow_none:
                    valid_type_names += (type(None).__name__,)

                self(
                    log_code,
                    TypeError(
                        "type check failed: variable `{}` has type `{}` not in `{}`".format(
                            name, type_name, valid_type_names
                        )
                    ),
                )

    def value_check(self, log_code, condition, *args):
        """Check for acceptable values for a given object.  If this check fails, a log message will
        be emitted at the error level on the log channel associated with this handler and a
        `ValueError` exception will be raised with an appropriate message.

        Args:
            log_code (str): A log code with format `<SUD55705215E>`
            condition (bool): A boolean value that should describe if this check
                passes `True` or fails `False`.
            *args: A variable set of arguments describing the value check that failed. The first
                argument is treated as the message, and any further arguments are lazily
                interpolated into it using `{}` format syntax.
        """
        if not get_config().enable_error_checks:
            return

        if not condition:
            self(
                log_code,
                ValueError("value check failed: {}".format(_interpolate(args))),
            )

    def response_check(self, log_code, condition, *args):
        """Check that a response from the inference endpoint has the expected shape. If this
        check fails, a `MalformedResponseError` is logged and raised.

        Unlike the type and value checks, this check is never disabled by
        `enable_error_checks` since the caller relies on it to detect a bad
        response.

        Args:
            log_code (str): A log code with format `<SUD55705215E>`
            condition (bool): `True` if the response passes the check
            *args: Message and lazy `{}` format arguments, as for `value_check`
        """
        if not condition:
            self(
                log_code,
                MalformedResponseError(
                    "malformed response: {}".format(_interpolate(args))
                ),
            )
