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

from collections import namedtuple


ParsedProperty = namedtuple("ParsedProperty", ["key", "value"])


class ParsedOption:
    """
    One option as it appeared on a command line.

    Carries the option's names, plus exactly one of:
    no value, one value, several values, or a property.
    Immutable.
    """

    __slots__ = ("short_name", "long_name", "values", "property")

    def __init__(self, short_name, long_name, values=(), property=None):
        assert not (values and property)
        object.__setattr__(self, "short_name", short_name)
        object.__setattr__(self, "long_name", long_name)
        object.__setattr__(self, "values", tuple(values))
        object.__setattr__(self, "property", property)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @property
    def name(self):
        return self.short_name or self.long_name

    def matches(self, name):
        return bool(name) and ((name == self.short_name) or (name == self.long_name))

    @property
    def is_property(self):
        return self.property is not None

    @property
    def has_value(self):
        return bool(self.values)

    @property
    def has_multiple_values(self):
        return len(self.values) > 1

    @property
    def value(self):
        return self.values[0] if self.values else None

    def _key(self):
        return (self.short_name, self.long_name, self.values, self.property)

    def __eq__(self, other):
        if not isinstance(other, ParsedOption):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        if self.property is not None:
            extra = f" property={self.property.key!r}={self.property.value!r}"
        elif self.values:
            extra = f" values={list(self.values)!r}"
        else:
            extra = ""
        return f"<{self.__class__.__name__} {self.name}{extra}>"


class CommandLine:
    """
    The result of parsing one command line: the options,
    in the order they appeared, and the positional arguments,
    also in order.

    Options are looked up by short or long name, without dashes:
        commandline.get_option_value("o")
        commandline.get_option_value("output")
    both find "-o foo" and "--output foo".
    """

    def __init__(self, options=(), arguments=()):
        self._options = tuple(options)
        self._arguments = tuple(arguments)

    @property
    def options(self):
        return self._options

    @property
    def arguments(self):
        return self._arguments

    def has_option(self, name):
        return any(o.matches(name) for o in self._options)

    def get_option(self, name):
        "Returns the first ParsedOption matching name, or None."
        for o in self._options:
            if o.matches(name):
                return o
        return None

    def get_option_value(self, name, default=None):
        o = self.get_option(name)
        if (o is None) or (not o.values):
            return default
        return o.value

    def get_option_values(self, name):
        "Returns every value given to name, across every occurrence."
        values = []
        for o in self._options:
            if o.matches(name):
                values.extend(o.values)
        return values

    def get_option_properties(self, name):
        "Merges the properties from every occurrence of name into a dict; later ones win."
        d = {}
        for o in self._options:
            if o.matches(name) and o.is_property:
                d[o.property.key] = o.property.value
        return d

    def __iter__(self):
        return iter(self._options)

    def __len__(self):
        return len(self._options)

    def __eq__(self, other):
        if not isinstance(other, CommandLine):
            return NotImplemented
        return (self._options == other._options) and (self._arguments == other._arguments)

    def __hash__(self):
        return hash((self._options, self._arguments))

    def __repr__(self):
        return f"<{self.__class__.__name__} options={list(self._options)!r} arguments={list(self._arguments)!r}>"


class CommandLineBuilder:
    """
    Collects options and arguments during a parse.
    build() returns the finished, immutable CommandLine.
    """
    def __init__(self):
        self.options = []
        self.arguments = []

    def add_option(self, option):
        self.options.append(option)

    def add_argument(self, argument):
        self.arguments.append(argument)

    def build(self):
        return CommandLine(self.options, self.arguments)
