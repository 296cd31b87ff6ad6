"""
Test suite for the MiniLang lexer.

Tests cover:
- Classification of every token class
- Keyword/identifier tie-breaking
- Maximal operator matches
- Whitespace handling and source reconstruction
- Lexical errors

Author: xwest
"""

import unittest
import re
import tempfile
import time
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from minilang.lexer.lexer import Lexer, tokenize, tokenize_file
from minilang.lexer.tokens import TokenType, SourceLocation, KEYWORDS
from minilang.lexer.errors import LexicalError, FrontendError


class TestLexer(unittest.TestCase):
    """Test cases for tokenization."""

    def _pairs(self, source: str):
        """Helper returning (type, lexeme) pairs for a snippet."""
        return [(token.type, token.lexeme) for token in tokenize(source)]

    def test_simple_assignment(self):
        """Every token class of a basic statement is recognised."""
        self.assertEqual(self._pairs("let x = 1;"), [
            (TokenType.KEYWORD, "let"),
            (TokenType.IDENTIFIER, "x"),
            (TokenType.OPERATOR, "="),
            (TokenType.CONSTANT, "1"),
            (TokenType.DELIMITER, ";"),
        ])

    def test_empty_input(self):
        self.assertEqual(tokenize(""), [])

    def test_whitespace_only_input(self):
        self.assertEqual(tokenize("  \n\t  \r\n"), [])

    def test_all_keywords(self):
        """Every reserved word lexes as a keyword on its own."""
        for keyword in KEYWORDS:
            with self.subTest(keyword=keyword):
                self.assertEqual(self._pairs(keyword), [(TokenType.KEYWORD, keyword)])

    def test_keyword_prefix_is_identifier(self):
        """Reserved words only win at a word boundary."""
        self.assertEqual(self._pairs("classroom"), [(TokenType.IDENTIFIER, "classroom")])
        self.assertEqual(self._pairs("letter"), [(TokenType.IDENTIFIER, "letter")])
        self.assertEqual(self._pairs("for_each"), [(TokenType.IDENTIFIER, "for_each")])
        self.assertEqual(self._pairs("if2"), [(TokenType.IDENTIFIER, "if2")])

    def test_keyword_followed_by_identifier(self):
        self.assertEqual(self._pairs("class room"), [
            (TokenType.KEYWORD, "class"),
            (TokenType.IDENTIFIER, "room"),
        ])

    def test_keyword_followed_by_delimiter(self):
        self.assertEqual(self._pairs("if(a)"), [
            (TokenType.KEYWORD, "if"),
            (TokenType.DELIMITER, "("),
            (TokenType.IDENTIFIER, "a"),
            (TokenType.DELIMITER, ")"),
        ])

    def test_identifiers(self):
        self.assertEqual(self._pairs("_tmp x1 camelCase"), [
            (TokenType.IDENTIFIER, "_tmp"),
            (TokenType.IDENTIFIER, "x1"),
            (TokenType.IDENTIFIER, "camelCase"),
        ])

    def test_constants_keep_their_text(self):
        self.assertEqual(self._pairs("42 3.14 007"), [
            (TokenType.CONSTANT, "42"),
            (TokenType.CONSTANT, "3.14"),
            (TokenType.CONSTANT, "007"),
        ])

    def test_single_character_operators(self):
        for op in "+-*/=<>!":
            with self.subTest(op=op):
                self.assertEqual(self._pairs(op), [(TokenType.OPERATOR, op)])

    def test_two_character_operators_are_not_split(self):
        for op in ("==", "!=", "<=", ">=", "+=", "-=", "*=", "/=", "++", "--"):
            with self.subTest(op=op):
                self.assertEqual(self._pairs(f"a{op}b"), [
                    (TokenType.IDENTIFIER, "a"),
                    (TokenType.OPERATOR, op),
                    (TokenType.IDENTIFIER, "b"),
                ])

    def test_delimiters(self):
        self.assertEqual(
            [token.type for token in tokenize("(){};,.")],
            [TokenType.DELIMITER] * 7
        )

    def test_no_whitespace_tokens_emitted(self):
        tokens = tokenize("while (i < 10) {\n    i = i + 1;\n}\n")
        self.assertNotIn(TokenType.WHITESPACE, [token.type for token in tokens])

    def test_lexemes_reconstruct_input_without_whitespace(self):
        source = (
            "class Counter {\n"
            "    function step(n, by) {\n"
            "        let total = n+by*2.5;\n"
            "        if (total >= 10) { total = 0; } else { total = total - 1; }\n"
            "    }\n"
            "}\n"
        )
        tokens = tokenize(source)
        self.assertEqual("".join(token.lexeme for token in tokens), re.sub(r"\s+", "", source))

    def test_token_locations(self):
        tokens = Lexer("let x\n  = 1;", "demo.ml").tokenize()
        self.assertEqual(tokens[0].location, SourceLocation("demo.ml", 1, 1, 0))
        self.assertEqual(tokens[2].lexeme, "=")
        self.assertEqual(tokens[2].location, SourceLocation("demo.ml", 2, 3, 8))

    def test_word_tokens_after_punctuation(self):
        self.assertEqual(self._pairs("a;let b=c.d"), [
            (TokenType.IDENTIFIER, "a"),
            (TokenType.DELIMITER, ";"),
            (TokenType.KEYWORD, "let"),
            (TokenType.IDENTIFIER, "b"),
            (TokenType.OPERATOR, "="),
            (TokenType.IDENTIFIER, "c"),
            (TokenType.DELIMITER, "."),
            (TokenType.IDENTIFIER, "d"),
        ])

    def test_large_input_scales_linearly(self):
        """Four times the input must not cost anywhere near sixteen times the time."""
        def best_time(source: str) -> float:
            timings = []
            for _ in range(2):
                start = time.perf_counter()
                tokens = tokenize(source)
                timings.append(time.perf_counter() - start)
            self.assertEqual(len(tokens), 5 * source.count("\n"))
            return min(timings)

        small = best_time("let x = 1;\n" * 25_000)
        large = best_time("let x = 1;\n" * 100_000)

        self.assertLess(large, small * 8)

    def test_lexer_can_be_rerun(self):
        lexer = Lexer("a b")
        first = lexer.tokenize()
        second = lexer.tokenize()
        self.assertEqual(first, second)
        self.assertEqual(len(second), 2)

    def test_token_to_dict(self):
        token = tokenize("counter")[0]
        self.assertEqual(token.to_dict(), {"type": "IDENTIFIER", "lexeme": "counter"})


class TestLexerErrors(unittest.TestCase):
    """Test cases for lexical errors."""

    def test_unrecognized_character(self):
        with self.assertRaises(LexicalError) as ctx:
            tokenize("@")
        self.assertEqual(ctx.exception.remaining, "@")
        self.assertEqual(ctx.exception.code, "L001")

    def test_error_carries_remaining_input(self):
        with self.assertRaises(LexicalError) as ctx:
            tokenize("let x = 1; # comment")
        self.assertEqual(ctx.exception.remaining, "# comment")
        self.assertIn('"# comment"', str(ctx.exception))

    def test_number_glued_to_letters_is_rejected(self):
        """A constant must end at a word boundary, so nothing matches here."""
        with self.assertRaises(LexicalError) as ctx:
            tokenize("x = 12abc;")
        self.assertEqual(ctx.exception.remaining, "12abc;")

    def test_lexical_error_is_frontend_error(self):
        with self.assertRaises(FrontendError):
            tokenize("a $ b")

    def test_diagnostic(self):
        with self.assertRaises(LexicalError) as ctx:
            tokenize("@")
        diagnostic = str(ctx.exception.diagnostic)
        self.assertTrue(diagnostic.startswith("ERROR[L001]: Lexical error"))
        self.assertIn("help: The character '@'", diagnostic)

    def test_tokenize_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "bad.ml")
            with open(path, "w", encoding="utf-8") as f:
                f.write("let a = 1;\nlet b = a ? 2;\n")

            with self.assertRaises(LexicalError) as ctx:
                tokenize_file(path)

        self.assertEqual(ctx.exception.remaining, "? 2;\n")

    def test_non_ascii_letter_is_rejected(self):
        with self.assertRaises(LexicalError) as ctx:
            tokenize("año")
        self.assertEqual(ctx.exception.remaining, "ño")


if __name__ == '__main__':
    unittest.main()
