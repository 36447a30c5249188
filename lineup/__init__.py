#!/usr/bin/env python3

"A small, strict parser for a single command's line.  Line 'em up!"
__version__ = "0.3.0"


# please leave this copyright notice in binary distributions.
license = """
lineup/__init__.py
part of the lineup software package
Copyright 2023 by the lineup authors
All rights reserved.

Permission is hereby granted, free of charge, to any person obtaining a
copy of this software and associated documentation files (the "Software"),
to deal in the Software without restriction, including without limitation
the rights to use, copy, modify, merge, publish, distribute, sublicense,
and/or sell copies of the Software, and to permit persons to whom the
Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included
in all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM,
DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE
OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.
"""

import enum


class LineupBaseException(Exception):
    pass

class ConfigurationError(LineupBaseException):
    """
    Raised when the lineup API is used improperly,
    e.g. declaring an option with no name.
    """
    pass


class ParseErrorKind(enum.Enum):
    UNKNOWN_OPTION = "unknown option"
    MALFORMED_PROPERTY = "malformed property"
    DASH_WITHOUT_OPERATOR = "dash without operator"
    MISSING_REQUIRED_OPTION = "missing required option"
    UNTERMINATED_QUOTE = "unterminated quote"


class UsageError(LineupBaseException, ValueError):
    """
    Raised when lineup processes an invalid command-line.

    Every subclass sets "kind" to a ParseErrorKind,
    so callers can branch without matching on the message.
    """
    kind = None

class UnknownOptionError(UsageError):
    kind = ParseErrorKind.UNKNOWN_OPTION

    def __init__(self, token):
        self.token = token
        super().__init__(f"Option: {token} is not a valid option for this command")

class MalformedPropertyError(UsageError):
    kind = ParseErrorKind.MALFORMED_PROPERTY

    def __init__(self, option):
        self.option = option
        super().__init__(f"Option {option}, must be part of a property")

class DashWithoutOperatorError(UsageError):
    kind = ParseErrorKind.DASH_WITHOUT_OPERATOR

    def __init__(self):
        super().__init__("Option: - must be followed by a valid operator")

class MissingRequiredOptionError(UsageError):
    kind = ParseErrorKind.MISSING_REQUIRED_OPTION

    def __init__(self, option):
        self.option = option
        super().__init__(f"Option: {option} is required for this command.")

class UnterminatedQuoteError(UsageError):
    kind = ParseErrorKind.UNTERMINATED_QUOTE

    def __init__(self, line):
        self.line = line
        super().__init__(f"unterminated quote in {line!r}")


from .words import find_all_words, join_words
from .schema import OptionDefinition, Parameter
from .result import ParsedProperty, ParsedOption, CommandLine
from .parser import CommandLineParser, IDLE, AwaitingValue
