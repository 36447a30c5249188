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

import big.all as big

from . import ConfigurationError
from . import text


DEFAULT_VALUE_SEPARATOR = ","


def short_option(name):
    assert name and isinstance(name, str)
    return f"-{name}"

def long_option(name):
    assert name and isinstance(name, str)
    return f"--{name}"


class OptionDefinition:
    """
    One option a command accepts.

    An option has a short name ("v", used as "-v"),
    a long name ("verbose", used as "--verbose"), or both.
    Its value shape is exactly one of:

        * a flag, which takes no value,
        * a single value, taken from the following word,
        * multiple values, taken from the following word
          and split on value_separator, or
        * a property, "key=value", glued onto the option
          itself: "-Dkey=value" or "--definekey=value".

    OptionDefinition objects aren't modified once they're
    added to a Parameter; parsing never writes to them.
    """

    def __init__(self, short_name, long_name, description='', has_value=False,
        argument=None, required=False, has_multiple_values=False, type=None,
        *, is_property=None, value_separator=DEFAULT_VALUE_SEPARATOR):

        if not (short_name or long_name):
            raise ConfigurationError("an option must have a short name, a long name, or both")

        if short_name:
            if not (isinstance(short_name, str) and (len(short_name) == 1)):
                raise ConfigurationError(f"short option name must be a single character, not {short_name!r}")
            if short_name == '-' or short_name.isspace():
                raise ConfigurationError(f"illegal short option name {short_name!r}")
        else:
            short_name = None

        if long_name:
            if not isinstance(long_name, str):
                raise ConfigurationError(f"long option name must be a str, not {long_name!r}")
            if long_name.startswith('-') or ('=' in long_name) or any(c.isspace() for c in long_name):
                raise ConfigurationError(f"illegal long option name {long_name!r}")
        else:
            long_name = None

        if is_property is None:
            is_property = bool(argument)

        if is_property and has_multiple_values:
            raise ConfigurationError(f"option {short_name or long_name!r} can't be both a property and take multiple values")

        if not (isinstance(value_separator, str) and (len(value_separator) == 1)):
            raise ConfigurationError(f"value_separator must be a single character, not {value_separator!r}")

        self.short_name = short_name
        self.long_name = long_name
        self.description = description or ''
        self.is_property = bool(is_property)
        self.has_multiple_values = bool(has_multiple_values)
        # properties and multiple values both need a value to work with
        self.has_value = bool(has_value or is_property or has_multiple_values)
        self.argument = argument
        self.required = bool(required)
        self.type = type
        self.value_separator = value_separator

    @property
    def name(self):
        return self.short_name or self.long_name

    @property
    def names(self):
        names = []
        if self.short_name:
            names.append(short_option(self.short_name))
        if self.long_name:
            names.append(long_option(self.long_name))
        return tuple(names)

    @property
    def display_name(self):
        return "|".join(self.names)

    def matches(self, name):
        return bool(name) and ((name == self.short_name) or (name == self.long_name))

    def split_values(self, word):
        """
        Splits the word following this option into its values.

        Only multiple-value options split, and only when
        the separator appears in the word.  Pieces are
        stripped, and empty pieces are discarded.
        """
        if not (self.has_multiple_values and (self.value_separator in word)):
            return [word]
        values = (s.strip() for s in big.multisplit(word, (self.value_separator,)))
        return [s for s in values if s]

    def __repr__(self):
        flags = []
        if self.is_property:
            flags.append("property")
        elif self.has_multiple_values:
            flags.append(f"multiple values separator={self.value_separator!r}")
        elif self.has_value:
            flags.append("value")
        if self.required:
            flags.append("required")
        flags = "".join(" " + s for s in flags)
        return f"<{self.__class__.__name__} {self.display_name}{flags}>"


class Parameter:
    """
    The set of options accepted by one command.

    Look options up by short name with find_option(),
    by long name with find_long_option(), and by the
    longest long name that starts a string with
    starts_with_long_option().
    """

    def __init__(self, name, usage='', *, value_separator=DEFAULT_VALUE_SEPARATOR):
        self.name = name
        self.usage = usage or ''
        self.value_separator = value_separator
        self._options = []
        self._short = {}
        self._long = {}

    def add_option(self, short_name, long_name, description='', has_value=False,
        argument=None, required=False, has_multiple_values=False, type=None,
        *, is_property=None, value_separator=None):
        """
        Declares an option.  Either short_name or long_name may be None.

        The four-argument form
            add_option(short_name, long_name, description, has_value)
        declares an optional, non-property, single-value-or-flag option.

        A non-empty "argument" declares a property option; "argument"
        is the label shown for it in help, e.g. "key=value".
        Returns the new OptionDefinition.
        """
        if value_separator is None:
            value_separator = self.value_separator
        option = OptionDefinition(short_name, long_name, description, has_value,
            argument, required, has_multiple_values, type,
            is_property=is_property, value_separator=value_separator)

        if option.short_name in self._short:
            raise ConfigurationError(f"{self.name}: short option {short_option(option.short_name)} defined twice")
        if option.long_name in self._long:
            raise ConfigurationError(f"{self.name}: long option {long_option(option.long_name)} defined twice")

        self._options.append(option)
        if option.short_name:
            self._short[option.short_name] = option
        if option.long_name:
            self._long[option.long_name] = option
        return option

    @property
    def options(self):
        return tuple(self._options)

    @property
    def required_options(self):
        return tuple(o for o in self._options if o.required)

    def find_option(self, short_name):
        return self._short.get(short_name)

    def find_long_option(self, long_name):
        return self._long.get(long_name)

    def starts_with_long_option(self, s):
        """
        Returns the option whose long name is the longest
        prefix of s, or None if no long name is a prefix of s.
        """
        best = None
        for long_name, option in self._long.items():
            if s.startswith(long_name) and ((best is None) or (len(long_name) > len(best.long_name))):
                best = option
        return best

    def __len__(self):
        return len(self._options)

    def __iter__(self):
        return iter(self._options)

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.name!r} options={len(self._options)}>"

    def help(self, margin=79, *, column=28):
        """
        Returns help text for this command as a string.

        Each option gets one entry; descriptions are wrapped
        into a column starting at "column".
        """
        lines = []
        usage = [self.name]
        if self._options:
            usage.append("[options]")
        lines.append("usage: " + " ".join(usage))

        if self.usage:
            lines.append("")
            lines.extend(text.wrap_words(self.usage.split(), margin))

        if self._options:
            lines.append("")
            lines.append("options:")
            for option in self._options:
                left = ", ".join(option.names)
                if option.is_property:
                    if option.short_name:
                        left = f"-{option.short_name}{option.argument or 'key=value'}"
                        if option.long_name:
                            left += f", --{option.long_name}{option.argument or 'key=value'}"
                    else:
                        left = f"--{option.long_name}{option.argument or 'key=value'}"
                elif option.has_multiple_values:
                    left += f" {option.argument or 'value'}{option.value_separator}..."
                elif option.has_value:
                    left += f" {option.argument or 'value'}"
                description = option.description.split()
                if option.required:
                    description.append("(required)")
                right = text.wrap_words(description, max(margin - column, 20))
                lines.append(text.merge_columns([left], right, column))

        return "\n".join(lines)
