from itertools import zip_longest

# please leave this copyright notice in binary distributions.
license = """
lineup/text.py
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


def wrap_words(words, margin=79, *, two_spaces=True):
    """
    Combines "words" into lines no longer than "margin"
    and returns them as a list of strings.

    A word longer than "margin" gets a line to itself.

    If "two_spaces" is true, words that end in sentence-ending
    punctuation ('.', '?', and '!') are followed by two spaces,
    not one.
    """
    lines = []
    line = []
    col = 0
    lastword = ''

    for word in words:
        if two_spaces and lastword.endswith(('.', '?', '!')):
            space = "  "
        else:
            space = " "

        if line and (col + len(space) + len(word)) > margin:
            lines.append("".join(line))
            line.clear()
            col = 0

        if line:
            line.append(space)
            col += len(space)
        line.append(word)
        col += len(word)
        lastword = word

    if line:
        lines.append("".join(line))
    return lines


def merge_columns(left, right, width, *, indent=2):
    """
    Lays out two lists of lines side by side.

    The left column is indented by "indent" spaces and padded
    out to "width" characters.  If a left line is too long to
    fit, it gets a line to itself and the right column starts
    on the following line.

    Returns a single string; trailing whitespace is stripped
    from every line.
    """
    prefix = " " * indent
    lines = []
    left = [prefix + s for s in left]

    if left and (len(left[-1]) >= width):
        lines.extend(left)
        left = []

    for l, r in zip_longest(left, right, fillvalue=''):
        if len(l) >= width:
            lines.append(l)
            l = ''
        lines.append((l.ljust(width) + r).rstrip())

    return "\n".join(lines)
