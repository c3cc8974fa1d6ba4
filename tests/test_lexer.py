from dotlayout.lexer import Lexer, Token, TokenKind


def kinds(text):
    return [tok.kind for tok in Lexer(text).tokens()]


def texts(text):
    return [tok.text for tok in Lexer(text).tokens() if tok.kind is TokenKind.IDENTIFIER]


def test_keywords():
    assert kinds("digraph graph node edge strict subgraph") == [
        TokenKind.DIGRAPH_KW,
        TokenKind.GRAPH_KW,
        TokenKind.NODE_KW,
        TokenKind.EDGE_KW,
        TokenKind.STRICT_KW,
        TokenKind.SUBGRAPH_KW,
        TokenKind.EOF,
    ]


def test_punctuation():
    assert kinds("= ; : [ ] { } , -> --") == [
        TokenKind.EQUAL,
        TokenKind.SEMICOLON,
        TokenKind.COLON,
        TokenKind.OPEN_BRACKET,
        TokenKind.CLOSE_BRACKET,
        TokenKind.OPEN_BRACE,
        TokenKind.CLOSE_BRACE,
        TokenKind.COMMA,
        TokenKind.ARROW_RIGHT,
        TokenKind.ARROW_LINE,
        TokenKind.EOF,
    ]


def test_identifiers_and_numbers():
    assert texts("abc_1 digraphX 42 3.14") == ["abc_1", "digraphX", "42", "3.14"]


def test_punctuation_without_spaces():
    assert kinds("a->b") == [
        TokenKind.IDENTIFIER,
        TokenKind.ARROW_RIGHT,
        TokenKind.IDENTIFIER,
        TokenKind.EOF,
    ]


def test_negative_number_consumes_following_char():
    lexer = Lexer("-5;")
    assert lexer.next_token() == Token(TokenKind.IDENTIFIER, text="-5")
    assert lexer.next_token().kind is TokenKind.EOF


def test_string_escapes():
    assert texts(r'"a\nb"') == ["a\nb"]
    assert texts(r'"a\lb"') == ["a\nb"]
    assert texts(r'"say \"hi\""') == ['say "hi"']


def test_string_may_hold_spaces_and_symbols():
    assert texts('"hello world -> {}"') == ["hello world -> {}"]


def test_unterminated_string_is_error():
    toks = list(Lexer('"abc').tokens())
    assert toks[-1].kind is TokenKind.ERROR
    assert isinstance(toks[-1].pos, int)


def test_comments_are_skipped():
    assert texts("/* block\n comment */ a // line comment\n b") == ["a", "b"]


def test_unknown_character_is_error():
    toks = list(Lexer("a @").tokens())
    assert [t.kind for t in toks] == [TokenKind.IDENTIFIER, TokenKind.ERROR]
    assert 0 < toks[-1].pos <= len("a @")


def test_lone_dash_is_error():
    assert kinds("- x")[0] is TokenKind.ERROR


def test_tokens_stops_after_eof():
    toks = list(Lexer("").tokens())
    assert toks == [Token(TokenKind.EOF)]


def test_next_token_after_eof_stays_eof():
    lexer = Lexer("a")
    lexer.next_token()
    assert lexer.next_token().kind is TokenKind.EOF
    assert lexer.next_token().kind is TokenKind.EOF
    assert not lexer.has_next()


def test_format_error_marks_line(capsys):
    lexer = Lexer("ab\n@c\nd")
    toks = list(lexer.tokens())
    assert toks[-1].kind is TokenKind.ERROR
    message = lexer.format_error()
    assert message.startswith("ab\n@c\n")
    assert message.endswith("^\n")
    assert "d" not in message
    lexer.print_error()
    assert capsys.readouterr().out == message


def test_read_number_allows_one_period():
    lexer = Lexer("1.2.3")
    first = lexer.next_token()
    assert first.kind is TokenKind.IDENTIFIER
    assert "1.2.3".startswith(first.text)
    assert first.text.count(".") == 1