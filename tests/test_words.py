#!/usr/bin/env python3


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


import unittest

import lineup
from lineup import find_all_words, join_words


class WordsTests(unittest.TestCase):

    def test_simple(self):
        self.assertEqual(find_all_words("ls -l /tmp"), ["ls", "-l", "/tmp"])

    def test_extra_whitespace(self):
        self.assertEqual(find_all_words("  ls \t -l   /tmp  "), ["ls", "-l", "/tmp"])

    def test_empty(self):
        self.assertEqual(find_all_words(""), [])
        self.assertEqual(find_all_words("   "), [])
        self.assertEqual(find_all_words(None), [])

    def test_quotes(self):
        self.assertEqual(find_all_words("cmd \"hello world\" 'a b'"), ["cmd", "hello world", "a b"])
        self.assertEqual(find_all_words("cmd --name=\"x y\""), ["cmd", "--name=x y"])

    def test_backslash(self):
        self.assertEqual(find_all_words("cmd a\\ b"), ["cmd", "a b"])

    def test_hash_is_not_a_comment(self):
        self.assertEqual(find_all_words("cmd #1 a#b"), ["cmd", "#1", "a#b"])

    def test_unterminated_quote(self):
        for line in ("cmd 'oops", 'cmd "oops', "cmd oops\\"):
            with self.subTest(line=line):
                with self.assertRaises(lineup.UnterminatedQuoteError) as cm:
                    find_all_words(line)
                self.assertEqual(cm.exception.kind, lineup.ParseErrorKind.UNTERMINATED_QUOTE)
                self.assertEqual(cm.exception.line, line)

    def test_join_words(self):
        self.assertEqual(join_words(["cmd", "a b", "c"]), "cmd 'a b' c")
        words = ["cmd", "it's", "x=\"y\""]
        self.assertEqual(find_all_words(join_words(words)), words)


if __name__ == "__main__":
    unittest.main()
