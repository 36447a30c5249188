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

import shlex

from . import UnterminatedQuoteError


def find_all_words(line):
    """
    Splits "line" into words, the way a POSIX shell would.

    Whitespace separates words; single quotes, double quotes,
    and backslashes protect whitespace inside a word.  The quote
    characters themselves are removed.  "#" is not a comment
    character here, it's just part of a word.

    Returns an empty list for an empty (or all-whitespace) line.
    Raises UnterminatedQuoteError if a quote is never closed.
    """
    if not line or line.isspace():
        return []
    lexer = shlex.shlex(line, posix=True)
    lexer.whitespace_split = True
    lexer.commenters = ''
    try:
        return list(lexer)
    except ValueError:
        # shlex raises a plain ValueError for "No closing quotation"
        # and "No escaped character"
        raise UnterminatedQuoteError(line) from None


def join_words(words):
    "The inverse of find_all_words()."
    return " ".join(shlex.quote(s) for s in words)
