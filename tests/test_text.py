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

from lineup import text


class WrapWordsTests(unittest.TestCase):

    def test_one_line(self):
        self.assertEqual(
            text.wrap_words("hello there. how are you? i am fine! so there's that.".split()),
            ["hello there.  how are you?  i am fine!  so there's that."])

    def test_margin(self):
        self.assertEqual(
            text.wrap_words("hello there. how are you? i am fine! so there's that.".split(), 20),
            ["hello there.  how", "are you?  i am fine!", "so there's that."])

    def test_one_space(self):
        self.assertEqual(text.wrap_words("a. b".split(), two_spaces=False), ["a. b"])

    def test_long_word(self):
        self.assertEqual(text.wrap_words(["a", "bbbbbbbbbb", "c"], 5), ["a", "bbbbbbbbbb", "c"])

    def test_empty(self):
        self.assertEqual(text.wrap_words([]), [])


class MergeColumnsTests(unittest.TestCase):

    def test_side_by_side(self):
        self.assertEqual(text.merge_columns(["-v, --verbose"], ["be loud"], 20), "  -v, --verbose     be loud")

    def test_right_column_longer(self):
        self.assertEqual(text.merge_columns(["-v"], ["a", "b"], 6), "  -v  a\n      b")

    def test_left_column_too_wide(self):
        self.assertEqual(
            text.merge_columns(["-x, --extremely-long-option value"], ["desc"], 20),
            "  -x, --extremely-long-option value\n" + (" " * 20) + "desc")

    def test_no_description(self):
        self.assertEqual(text.merge_columns(["-v"], [], 10), "  -v")


if __name__ == "__main__":
    unittest.main()
