# part of the lineup software package
# Copyright 2023 by the lineup authors
# All rights reserved.
#
# Permission is hereby granted, free of charge, to any person obtaining a
# copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included
# in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
# IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM,
# DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
# TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE
# OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

##
## The parser is a two-state machine.  Its only state is
## "is there an option waiting for its value?"
##
##     IDLE                  nothing pending.
##     AwaitingValue(option) the last word was an option that
##                           wants its value from the next word.
##
## Every word causes exactly one transition.  Options go
## straight into the result as soon as they're complete;
## nothing is ever stored on the OptionDefinition, so one
## parser can be reused for any number of parse() calls.
##

from collections import namedtuple

import big.all as big

from . import DashWithoutOperatorError
from . import MalformedPropertyError
from . import MissingRequiredOptionError
from . import UnknownOptionError
from .result import CommandLineBuilder, ParsedOption, ParsedProperty
from .schema import Parameter, long_option, short_option
from .words import find_all_words


class Idle:
    def __repr__(self):
        return "IDLE"

IDLE = Idle()

AwaitingValue = namedtuple("AwaitingValue", ["option"])


def split_attached_value(remainder):
    """
    Splits the text glued onto an option name.

    "=value" returns "value".  Anything else (including
    the empty string, "=" by itself, and text that doesn't
    start with "=") returns None.
    """
    name, equals, value = remainder.partition("=")
    if name or not (equals and value):
        return None
    return value

def split_property(remainder):
    """
    Splits "key=value" into ParsedProperty(key, value).
    Returns None if there's no "=" in remainder.
    """
    key, equals, value = remainder.partition("=")
    if not equals:
        return None
    return ParsedProperty(key, value)


class CommandLineParser:
    """
    Parses command lines for a single command.

        parser = CommandLineParser("ls", "list files")
        parser.add_option("l", "long", "use a long listing format", False)
        parser.add_option("w", "width", "set output width", True)
        commandline = parser.parse("ls -l --width 80 /tmp")

    parse() raises a UsageError subclass if the line is invalid.
    """

    def __init__(self, parameter, usage=''):
        if not isinstance(parameter, Parameter):
            parameter = Parameter(parameter, usage)
        self.parameter = parameter
        self.log = big.Log()

    def add_option(self, short_name, long_name, description='', has_value=False,
        argument=None, required=False, has_multiple_values=False, type=None,
        **kwargs):
        return self.parameter.add_option(short_name, long_name, description, has_value,
            argument, required, has_multiple_values, type, **kwargs)

    def help(self, margin=79):
        return self.parameter.help(margin)

    def parse(self, line):
        self.log = big.Log()
        self.log.enter(f"parse {line!r}")

        words = find_all_words(line)
        builder = CommandLineBuilder()
        state = IDLE

        # words[0] is the name of the command.
        for word in words[1:]:
            state = self.transition(state, word, builder)

        if state is not IDLE:
            self.log(f"dropping {state.option.display_name}, no value after it")

        self.check_for_missing_required_options(builder.options)

        commandline = builder.build()
        self.log("parse complete")
        self.log.exit()
        return commandline

    def transition(self, state, word, builder):
        """
        Consumes one word.  Returns the next state.
        """
        if word.startswith("-"):
            if state is not IDLE:
                self.log(f"dropping {state.option.display_name}, {word!r} isn't a value")
            if word.startswith("--"):
                return self._long_option(word, builder)
            return self._short_option(word, builder)

        if state is not IDLE:
            option = state.option
            self._emit(builder, option, option.split_values(word))
            return IDLE

        builder.add_argument(word)
        return IDLE

    def _emit(self, builder, option, values=(), property=None):
        parsed = ParsedOption(option.short_name, option.long_name, values, property)
        self.log(f"option {parsed!r}")
        builder.add_option(parsed)

    def _long_option(self, word, builder):
        s = word[2:]
        option = self.parameter.find_long_option(s)
        if option:
            remainder = ''
        else:
            option = self.parameter.starts_with_long_option(s)
            if not option:
                raise UnknownOptionError(word)
            remainder = s[len(option.long_name):]

        if option.is_property:
            property = remainder and split_property(remainder)
            if not property:
                raise MalformedPropertyError(long_option(option.long_name))
            self._emit(builder, option, property=property)
            return IDLE

        if remainder:
            value = split_attached_value(remainder)
            if value is None:
                raise UnknownOptionError(word)
            self._emit(builder, option, option.split_values(value))
            return IDLE

        if not option.has_value:
            self._emit(builder, option)
            return IDLE

        return AwaitingValue(option)

    def _short_option(self, word, builder):
        if len(word) == 1:
            raise DashWithoutOperatorError()

        option = self.parameter.find_option(word[1])
        if not option:
            raise UnknownOptionError(word)
        remainder = word[2:]

        if option.is_property:
            property = remainder and split_property(remainder)
            if not property:
                raise MalformedPropertyError(short_option(option.short_name))
            self._emit(builder, option, property=property)
            return IDLE

        if not option.has_value:
            self._emit(builder, option)
            return IDLE

        value = split_attached_value(remainder)
        if value is not None:
            self._emit(builder, option, option.split_values(value))
            return IDLE

        return AwaitingValue(option)

    def check_for_missing_required_options(self, parsed_options):
        for option in self.parameter.required_options:
            for parsed in parsed_options:
                if ((option.short_name and (parsed.short_name == option.short_name))
                    or (option.long_name and (parsed.long_name == option.long_name))):
                    break
            else:
                raise MissingRequiredOptionError(option.display_name)
