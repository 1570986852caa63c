"""Builder functions for the Curly syntax model.

Every public construction function is registered with :func:`builder` under a
public builder name (``"ClassDeclaration"``, ``"Token"``...). Several Python
functions may share one builder name; they form that builder's overloads and
are told apart by their positional signatures when a call is replayed.
Parameter names follow the node attribute they fill (``open_brace_token`` for
``OpenBraceToken``).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from .kinds import (
    ASSIGNMENT_OPERATORS,
    BINARY_OPERATORS,
    CHECKED_KEYWORDS,
    LITERAL_TOKENS,
    POSTFIX_OPERATORS,
    PREFIX_OPERATORS,
    SyntaxKind,
    has_fixed_text,
    token_text,
)
from .nodes import (
    EMPTY_TRIVIA,
    ArgumentListSyntax,
    BlockSyntax,
    ElseClauseSyntax,
    ExpressionSyntax,
    LiteralValue,
    ParameterListSyntax,
    SeparatedSyntaxList,
    SimpleNameSyntax,
    StatementSyntax,
    StructuredTriviaSyntax,
    SyntaxList,
    SyntaxNode,
    SyntaxToken,
    SyntaxTokenList,
    SyntaxTrivia,
    SyntaxTriviaList,
    TypeSyntax,
    describe,
    make_node,
    satisfies,
)
from .schema import TOKEN, NODE_SCHEMAS

BUILDERS: list[Callable[..., Any]] = []


def builder(name: str, *, returns: str, generic: bool = False) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Register a construction function as one overload of builder ``name``."""

    def decorate(fn: Callable[..., Any]) -> Callable[..., Any]:
        fn.builder_name = name
        fn.builder_returns = returns
        fn.builder_generic = generic
        BUILDERS.append(fn)
        return fn

    return decorate


# ---------------------------------------------------------------------------
# Literal text
# ---------------------------------------------------------------------------

_ESCAPES = {
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def escape_text(value: str, quote: str = '"') -> str:
    out = []
    for char in value:
        if char == quote:
            out.append("\\" + quote)
        else:
            out.append(_ESCAPES.get(char, char))
    return "".join(out)


def canonical_literal_text(value: LiteralValue) -> str:
    """Text a freshly built literal token would carry for ``value``."""

    if isinstance(value, str):
        return '"' + escape_text(value) + '"'
    if isinstance(value, bool):
        raise TypeError("boolean values are written with true/false keywords")
    if isinstance(value, int):
        return str(value)
    return repr(value)


def canonical_character_text(value: str) -> str:
    return "'" + escape_text(value, quote="'") + "'"


def _literal_kind(value: LiteralValue) -> SyntaxKind:
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise TypeError(f"Literal value must be str, int or float, got {type(value).__name__}")
    if isinstance(value, str):
        return SyntaxKind.STRING_LITERAL_TOKEN
    return SyntaxKind.NUMERIC_LITERAL_TOKEN


def _trivia(items: SyntaxTriviaList | None) -> SyntaxTriviaList:
    return EMPTY_TRIVIA if items is None else items


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------


@builder("Token", returns="SyntaxToken")
def token(kind: SyntaxKind) -> SyntaxToken:
    return SyntaxToken(kind=kind, text=token_text(kind))


@builder("Token", returns="SyntaxToken")
def token_with_trivia(leading: SyntaxTriviaList, kind: SyntaxKind, trailing: SyntaxTriviaList) -> SyntaxToken:
    return SyntaxToken(
        kind=kind,
        text=token_text(kind),
        leading_trivia=_trivia(leading),
        trailing_trivia=_trivia(trailing),
    )


@builder("Token", returns="SyntaxToken")
def token_with_text(
    leading: SyntaxTriviaList,
    kind: SyntaxKind,
    text: str,
    value_text: str,
    trailing: SyntaxTriviaList,
) -> SyntaxToken:
    return SyntaxToken(
        kind=kind,
        text=text,
        value=value_text,
        leading_trivia=_trivia(leading),
        trailing_trivia=_trivia(trailing),
    )


@builder("Identifier", returns="SyntaxToken")
def identifier_token(text: str) -> SyntaxToken:
    return SyntaxToken(kind=SyntaxKind.IDENTIFIER_TOKEN, text=text, value=text)


@builder("Identifier", returns="SyntaxToken")
def identifier_token_with_trivia(leading: SyntaxTriviaList, text: str, trailing: SyntaxTriviaList) -> SyntaxToken:
    return SyntaxToken(
        kind=SyntaxKind.IDENTIFIER_TOKEN,
        text=text,
        value=text,
        leading_trivia=_trivia(leading),
        trailing_trivia=_trivia(trailing),
    )


@builder("Literal", returns="SyntaxToken")
def literal(value: LiteralValue) -> SyntaxToken:
    return SyntaxToken(kind=_literal_kind(value), text=canonical_literal_text(value), value=value)


@builder("Literal", returns="SyntaxToken")
def literal_with_text(text: str, value: LiteralValue) -> SyntaxToken:
    return SyntaxToken(kind=_literal_kind(value), text=text, value=value)


@builder("Literal", returns="SyntaxToken")
def literal_with_trivia(
    leading: SyntaxTriviaList, text: str, value: LiteralValue, trailing: SyntaxTriviaList
) -> SyntaxToken:
    return SyntaxToken(
        kind=_literal_kind(value),
        text=text,
        value=value,
        leading_trivia=_trivia(leading),
        trailing_trivia=_trivia(trailing),
    )


@builder("CharacterLiteral", returns="SyntaxToken")
def character_literal(value: str) -> SyntaxToken:
    return SyntaxToken(
        kind=SyntaxKind.CHARACTER_LITERAL_TOKEN,
        text=canonical_character_text(value),
        value=value,
    )


@builder("CharacterLiteral", returns="SyntaxToken")
def character_literal_with_text(text: str, value: str) -> SyntaxToken:
    return SyntaxToken(kind=SyntaxKind.CHARACTER_LITERAL_TOKEN, text=text, value=value)


@builder("CharacterLiteral", returns="SyntaxToken")
def character_literal_with_trivia(
    leading: SyntaxTriviaList, text: str, value: str, trailing: SyntaxTriviaList
) -> SyntaxToken:
    return SyntaxToken(
        kind=SyntaxKind.CHARACTER_LITERAL_TOKEN,
        text=text,
        value=value,
        leading_trivia=_trivia(leading),
        trailing_trivia=_trivia(trailing),
    )


@builder("MissingToken", returns="SyntaxToken")
def missing_token(kind: SyntaxKind) -> SyntaxToken:
    return SyntaxToken(kind=kind, text="", is_missing=True)


@builder("MissingToken", returns="SyntaxToken")
def missing_token_with_trivia(leading: SyntaxTriviaList, kind: SyntaxKind, trailing: SyntaxTriviaList) -> SyntaxToken:
    return SyntaxToken(
        kind=kind,
        text="",
        leading_trivia=_trivia(leading),
        trailing_trivia=_trivia(trailing),
        is_missing=True,
    )


@builder("BadToken", returns="SyntaxToken")
def bad_token(leading: SyntaxTriviaList, text: str, trailing: SyntaxTriviaList) -> SyntaxToken:
    return SyntaxToken(
        kind=SyntaxKind.BAD_TOKEN,
        text=text,
        leading_trivia=_trivia(leading),
        trailing_trivia=_trivia(trailing),
    )


def _xml_token(kind: SyntaxKind, leading, text, value, trailing) -> SyntaxToken:
    return SyntaxToken(
        kind=kind,
        text=text,
        value=value,
        leading_trivia=_trivia(leading),
        trailing_trivia=_trivia(trailing),
    )


@builder("XmlTextLiteral", returns="SyntaxToken")
def xml_text_literal(leading: SyntaxTriviaList, text: str, value: str, trailing: SyntaxTriviaList) -> SyntaxToken:
    return _xml_token(SyntaxKind.XML_TEXT_LITERAL_TOKEN, leading, text, value, trailing)


@builder("XmlTextNewLine", returns="SyntaxToken")
def xml_text_new_line(leading: SyntaxTriviaList, text: str, value: str, trailing: SyntaxTriviaList) -> SyntaxToken:
    return _xml_token(SyntaxKind.XML_TEXT_LITERAL_NEW_LINE_TOKEN, leading, text, value, trailing)


@builder("XmlEntity", returns="SyntaxToken")
def xml_entity(leading: SyntaxTriviaList, text: str, value: str, trailing: SyntaxTriviaList) -> SyntaxToken:
    return _xml_token(SyntaxKind.XML_ENTITY_LITERAL_TOKEN, leading, text, value, trailing)


# ---------------------------------------------------------------------------
# Trivia
# ---------------------------------------------------------------------------

SPACE = SyntaxTrivia(SyntaxKind.WHITESPACE_TRIVIA, " ")
TAB = SyntaxTrivia(SyntaxKind.WHITESPACE_TRIVIA, "\t")
LINE_FEED = SyntaxTrivia(SyntaxKind.END_OF_LINE_TRIVIA, "\n")
CARRIAGE_RETURN = SyntaxTrivia(SyntaxKind.END_OF_LINE_TRIVIA, "\r")
CARRIAGE_RETURN_LINE_FEED = SyntaxTrivia(SyntaxKind.END_OF_LINE_TRIVIA, "\r\n")

WELL_KNOWN_TRIVIA: dict[str, SyntaxTrivia] = {
    "Space": SPACE,
    "Tab": TAB,
    "LineFeed": LINE_FEED,
    "CarriageReturn": CARRIAGE_RETURN,
    "CarriageReturnLineFeed": CARRIAGE_RETURN_LINE_FEED,
}


@builder("Whitespace", returns="SyntaxTrivia")
def whitespace(text: str) -> SyntaxTrivia:
    if text.strip(" \t\f\v"):
        raise ValueError(f"Whitespace trivia cannot contain {text!r}")
    return SyntaxTrivia(SyntaxKind.WHITESPACE_TRIVIA, text)


@builder("EndOfLine", returns="SyntaxTrivia")
def end_of_line(text: str) -> SyntaxTrivia:
    if text not in ("\n", "\r", "\r\n"):
        raise ValueError(f"End-of-line trivia cannot be {text!r}")
    return SyntaxTrivia(SyntaxKind.END_OF_LINE_TRIVIA, text)


@builder("Comment", returns="SyntaxTrivia")
def comment(text: str) -> SyntaxTrivia:
    if text.startswith("/*"):
        return SyntaxTrivia(SyntaxKind.MULTI_LINE_COMMENT_TRIVIA, text)
    if text.startswith("//"):
        return SyntaxTrivia(SyntaxKind.SINGLE_LINE_COMMENT_TRIVIA, text)
    raise ValueError(f"Not a comment: {text!r}")


@builder("DocumentComment", returns="SyntaxTrivia")
def document_comment(text: str) -> SyntaxTrivia:
    kind = (
        SyntaxKind.MULTI_LINE_DOCUMENTATION_COMMENT_TRIVIA
        if text.startswith("/**")
        else SyntaxKind.SINGLE_LINE_DOCUMENTATION_COMMENT_TRIVIA
    )
    return SyntaxTrivia(kind, text)


@builder("PreprocessingMessage", returns="SyntaxTrivia")
def preprocessing_message(text: str) -> SyntaxTrivia:
    return SyntaxTrivia(SyntaxKind.PREPROCESSING_MESSAGE_TRIVIA, text)


@builder("DisabledText", returns="SyntaxTrivia")
def disabled_text(text: str) -> SyntaxTrivia:
    return SyntaxTrivia(SyntaxKind.DISABLED_TEXT_TRIVIA, text)


@builder("DocumentationCommentExterior", returns="SyntaxTrivia")
def documentation_comment_exterior(text: str) -> SyntaxTrivia:
    return SyntaxTrivia(SyntaxKind.DOCUMENTATION_COMMENT_EXTERIOR_TRIVIA, text)


@builder("Trivia", returns="SyntaxTrivia")
def trivia(structure: StructuredTriviaSyntax) -> SyntaxTrivia:
    return SyntaxTrivia(structure.kind, structure.to_full_string(), structure)


# ---------------------------------------------------------------------------
# Lists
# ---------------------------------------------------------------------------


def _check_elements(items: Iterable[Any], element_type: str) -> None:
    for item in items:
        if not satisfies(item, element_type):
            raise TypeError(f"Expected {element_type} element, got {describe(item)}")


@builder("List", returns="SyntaxList", generic=True)
def list_of(nodes: list | None = None, *, element_type: str = "SyntaxNode") -> SyntaxList:
    items = tuple(nodes or ())
    _check_elements(items, element_type)
    return SyntaxList(items)


@builder("SingletonList", returns="SyntaxList", generic=True)
def singleton_list(node: SyntaxNode, *, element_type: str = "SyntaxNode") -> SyntaxList:
    _check_elements((node,), element_type)
    return SyntaxList((node,))


@builder("SeparatedList", returns="SeparatedSyntaxList", generic=True)
def separated_list(nodes_and_tokens: list | None = None, *, element_type: str = "SyntaxNode") -> SeparatedSyntaxList:
    items = tuple(nodes_and_tokens or ())
    _check_elements(items[::2], element_type)
    _check_elements(items[1::2], "SyntaxToken")
    return SeparatedSyntaxList(items)


@builder("SingletonSeparatedList", returns="SeparatedSyntaxList", generic=True)
def singleton_separated_list(node: SyntaxNode, *, element_type: str = "SyntaxNode") -> SeparatedSyntaxList:
    _check_elements((node,), element_type)
    return SeparatedSyntaxList((node,))


@builder("TokenList", returns="SyntaxTokenList")
def token_list(*tokens: SyntaxToken) -> SyntaxTokenList:
    _check_elements(tokens, "SyntaxToken")
    return SyntaxTokenList(tuple(tokens))


@builder("TriviaList", returns="SyntaxTriviaList")
def trivia_list(*trivia: SyntaxTrivia) -> SyntaxTriviaList:
    _check_elements(trivia, "SyntaxTrivia")
    return SyntaxTriviaList(tuple(trivia))


# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------

_NAMED_DEFAULT_TOKENS = {
    "EndOfComment": SyntaxKind.END_OF_DOCUMENTATION_COMMENT_TOKEN,
    "StringStartToken": SyntaxKind.INTERPOLATED_STRING_START_TOKEN,
    "StringEndToken": SyntaxKind.INTERPOLATED_STRING_END_TOKEN,
}


def _default_token(type_name: str, kind: SyntaxKind, attribute: str) -> SyntaxToken | None:
    if attribute == "TextToken":
        return SyntaxToken(SyntaxKind.INTERPOLATED_STRING_TEXT_TOKEN, "", "")
    if attribute in _NAMED_DEFAULT_TOKENS:
        return token(_NAMED_DEFAULT_TOKENS[attribute])
    if attribute == "OperatorToken":
        for table in (BINARY_OPERATORS, ASSIGNMENT_OPERATORS, PREFIX_OPERATORS, POSTFIX_OPERATORS):
            if kind in table:
                return token(table[kind])
        return token(SyntaxKind.DOT_TOKEN)
    if attribute == "Keyword":
        if type_name == "ClassDeclaration":
            return token(SyntaxKind.CLASS_KEYWORD)
        if kind in CHECKED_KEYWORDS:
            return token(CHECKED_KEYWORDS[kind])
        return None
    if attribute == "Token" and has_fixed_text(LITERAL_TOKENS.get(kind, SyntaxKind.NONE)):
        return token(LITERAL_TOKENS[kind])
    try:
        default_kind = SyntaxKind(attribute)
    except ValueError:
        return None
    return token(default_kind) if has_fixed_text(default_kind) else None


def create_node(type_name: str, kind: SyntaxKind | None = None, **values: Any) -> SyntaxNode:
    """Create a node, filling unset required tokens with their default spelling.

    Keyword names are attribute names (``OpenBraceToken=...``). ``None`` values
    count as unset.
    """

    schema = NODE_SCHEMAS[type_name]
    if kind is None:
        kind = schema.kinds[0]
    given = {name: value for name, value in values.items() if value is not None}
    for spec in schema.attributes:
        if spec.name in given or spec.shape != TOKEN or spec.optional:
            continue
        default = _default_token(type_name, kind, spec.name)
        if default is None:
            raise TypeError(f"{type_name} requires a {spec.name} token")
        given[spec.name] = default
    return make_node(type_name, kind, given)


@builder("CompilationUnit", returns="CompilationUnitSyntax")
def compilation_unit() -> SyntaxNode:
    return create_node("CompilationUnit")


@builder("CompilationUnit", returns="CompilationUnitSyntax")
def compilation_unit_full(members: SyntaxList, end_of_file_token: SyntaxToken) -> SyntaxNode:
    return create_node("CompilationUnit", Members=members, EndOfFileToken=end_of_file_token)


@builder("GlobalStatement", returns="GlobalStatementSyntax")
def global_statement(statement: StatementSyntax) -> SyntaxNode:
    return create_node("GlobalStatement", Statement=statement)


@builder("ClassDeclaration", returns="ClassDeclarationSyntax")
def class_declaration(identifier: str) -> SyntaxNode:
    return create_node("ClassDeclaration", Identifier=identifier_token(identifier))


@builder("ClassDeclaration", returns="ClassDeclarationSyntax")
def class_declaration_from_token(identifier: SyntaxToken) -> SyntaxNode:
    return create_node("ClassDeclaration", Identifier=identifier)


@builder("ClassDeclaration", returns="ClassDeclarationSyntax")
def class_declaration_full(
    modifiers: SyntaxTokenList,
    keyword: SyntaxToken,
    identifier: SyntaxToken,
    open_brace_token: SyntaxToken,
    members: SyntaxList,
    close_brace_token: SyntaxToken,
    semicolon_token: SyntaxToken | None,
) -> SyntaxNode:
    return create_node(
        "ClassDeclaration",
        Modifiers=modifiers,
        Keyword=keyword,
        Identifier=identifier,
        OpenBraceToken=open_brace_token,
        Members=members,
        CloseBraceToken=close_brace_token,
        SemicolonToken=semicolon_token,
    )


@builder("MethodDeclaration", returns="MethodDeclarationSyntax")
def method_declaration(return_type: TypeSyntax, identifier: str) -> SyntaxNode:
    return create_node(
        "MethodDeclaration",
        ReturnType=return_type,
        Identifier=identifier_token(identifier),
        ParameterList=parameter_list(),
    )


@builder("MethodDeclaration", returns="MethodDeclarationSyntax")
def method_declaration_from_token(return_type: TypeSyntax, identifier: SyntaxToken) -> SyntaxNode:
    return create_node(
        "MethodDeclaration",
        ReturnType=return_type,
        Identifier=identifier,
        ParameterList=parameter_list(),
    )


@builder("MethodDeclaration", returns="MethodDeclarationSyntax")
def method_declaration_full(
    modifiers: SyntaxTokenList,
    return_type: TypeSyntax,
    identifier: SyntaxToken,
    parameter_list: ParameterListSyntax,
    body: BlockSyntax | None,
    semicolon_token: SyntaxToken | None,
) -> SyntaxNode:
    return create_node(
        "MethodDeclaration",
        Modifiers=modifiers,
        ReturnType=return_type,
        Identifier=identifier,
        ParameterList=parameter_list,
        Body=body,
        SemicolonToken=semicolon_token,
    )


@builder("ParameterList", returns="ParameterListSyntax")
def parameter_list(parameters: SeparatedSyntaxList | None = None) -> SyntaxNode:
    return create_node("ParameterList", Parameters=parameters)


@builder("ParameterList", returns="ParameterListSyntax")
def parameter_list_full(
    open_paren_token: SyntaxToken, parameters: SeparatedSyntaxList, close_paren_token: SyntaxToken
) -> SyntaxNode:
    return create_node(
        "ParameterList",
        OpenParenToken=open_paren_token,
        Parameters=parameters,
        CloseParenToken=close_paren_token,
    )


@builder("Parameter", returns="ParameterSyntax")
def parameter(identifier: SyntaxToken) -> SyntaxNode:
    return create_node("Parameter", Identifier=identifier)


@builder("Parameter", returns="ParameterSyntax")
def parameter_full(type: TypeSyntax | None, identifier: SyntaxToken) -> SyntaxNode:
    return create_node("Parameter", Type=type, Identifier=identifier)


@builder("Block", returns="BlockSyntax")
def block(*statements: StatementSyntax) -> SyntaxNode:
    return create_node("Block", Statements=list_of(list(statements), element_type="StatementSyntax"))


@builder("Block", returns="BlockSyntax")
def block_from_list(statements: SyntaxList | None = None) -> SyntaxNode:
    return create_node("Block", Statements=statements)


@builder("Block", returns="BlockSyntax")
def block_full(open_brace_token: SyntaxToken, statements: SyntaxList, close_brace_token: SyntaxToken) -> SyntaxNode:
    return create_node(
        "Block",
        OpenBraceToken=open_brace_token,
        Statements=statements,
        CloseBraceToken=close_brace_token,
    )


@builder("ReturnStatement", returns="ReturnStatementSyntax")
def return_statement(expression: ExpressionSyntax | None = None) -> SyntaxNode:
    return create_node("ReturnStatement", Expression=expression)


@builder("ReturnStatement", returns="ReturnStatementSyntax")
def return_statement_full(
    return_keyword: SyntaxToken, expression: ExpressionSyntax | None, semicolon_token: SyntaxToken
) -> SyntaxNode:
    return create_node(
        "ReturnStatement",
        ReturnKeyword=return_keyword,
        Expression=expression,
        SemicolonToken=semicolon_token,
    )


@builder("ExpressionStatement", returns="ExpressionStatementSyntax")
def expression_statement(expression: ExpressionSyntax) -> SyntaxNode:
    return create_node("ExpressionStatement", Expression=expression)


@builder("ExpressionStatement", returns="ExpressionStatementSyntax")
def expression_statement_full(expression: ExpressionSyntax, semicolon_token: SyntaxToken) -> SyntaxNode:
    return create_node("ExpressionStatement", Expression=expression, SemicolonToken=semicolon_token)


@builder("LocalDeclarationStatement", returns="LocalDeclarationStatementSyntax")
def local_declaration_statement(identifier: SyntaxToken, value: ExpressionSyntax) -> SyntaxNode:
    return create_node("LocalDeclarationStatement", Identifier=identifier, Value=value)


@builder("LocalDeclarationStatement", returns="LocalDeclarationStatementSyntax")
def local_declaration_statement_full(
    var_keyword: SyntaxToken,
    identifier: SyntaxToken,
    equals_token: SyntaxToken,
    value: ExpressionSyntax,
    semicolon_token: SyntaxToken,
) -> SyntaxNode:
    return create_node(
        "LocalDeclarationStatement",
        VarKeyword=var_keyword,
        Identifier=identifier,
        EqualsToken=equals_token,
        Value=value,
        SemicolonToken=semicolon_token,
    )


@builder("IfStatement", returns="IfStatementSyntax")
def if_statement(condition: ExpressionSyntax, statement: StatementSyntax) -> SyntaxNode:
    return create_node("IfStatement", Condition=condition, Statement=statement)


@builder("IfStatement", returns="IfStatementSyntax")
def if_statement_with_else(
    condition: ExpressionSyntax, statement: StatementSyntax, else_: ElseClauseSyntax | None
) -> SyntaxNode:
    return create_node("IfStatement", Condition=condition, Statement=statement, Else=else_)


@builder("IfStatement", returns="IfStatementSyntax")
def if_statement_full(
    if_keyword: SyntaxToken,
    open_paren_token: SyntaxToken,
    condition: ExpressionSyntax,
    close_paren_token: SyntaxToken,
    statement: StatementSyntax,
    else_: ElseClauseSyntax | None,
) -> SyntaxNode:
    return create_node(
        "IfStatement",
        IfKeyword=if_keyword,
        OpenParenToken=open_paren_token,
        Condition=condition,
        CloseParenToken=close_paren_token,
        Statement=statement,
        Else=else_,
    )


@builder("ElseClause", returns="ElseClauseSyntax")
def else_clause(statement: StatementSyntax) -> SyntaxNode:
    return create_node("ElseClause", Statement=statement)


@builder("ElseClause", returns="ElseClauseSyntax")
def else_clause_full(else_keyword: SyntaxToken, statement: StatementSyntax) -> SyntaxNode:
    return create_node("ElseClause", ElseKeyword=else_keyword, Statement=statement)


@builder("WhileStatement", returns="WhileStatementSyntax")
def while_statement(condition: ExpressionSyntax, statement: StatementSyntax) -> SyntaxNode:
    return create_node("WhileStatement", Condition=condition, Statement=statement)


@builder("WhileStatement", returns="WhileStatementSyntax")
def while_statement_full(
    while_keyword: SyntaxToken,
    open_paren_token: SyntaxToken,
    condition: ExpressionSyntax,
    close_paren_token: SyntaxToken,
    statement: StatementSyntax,
) -> SyntaxNode:
    return create_node(
        "WhileStatement",
        WhileKeyword=while_keyword,
        OpenParenToken=open_paren_token,
        Condition=condition,
        CloseParenToken=close_paren_token,
        Statement=statement,
    )


@builder("IdentifierName", returns="IdentifierNameSyntax")
def identifier_name(name: str) -> SyntaxNode:
    return create_node("IdentifierName", Identifier=identifier_token(name))


@builder("IdentifierName", returns="IdentifierNameSyntax")
def identifier_name_from_token(identifier: SyntaxToken) -> SyntaxNode:
    return create_node("IdentifierName", Identifier=identifier)


@builder("PredefinedType", returns="PredefinedTypeSyntax")
def predefined_type(keyword: SyntaxToken) -> SyntaxNode:
    return create_node("PredefinedType", Keyword=keyword)


@builder("BinaryExpression", returns="BinaryExpressionSyntax")
def binary_expression(kind: SyntaxKind, left: ExpressionSyntax, right: ExpressionSyntax) -> SyntaxNode:
    return create_node("BinaryExpression", kind, Left=left, Right=right)


@builder("BinaryExpression", returns="BinaryExpressionSyntax")
def binary_expression_full(
    kind: SyntaxKind, left: ExpressionSyntax, operator_token: SyntaxToken, right: ExpressionSyntax
) -> SyntaxNode:
    return create_node("BinaryExpression", kind, Left=left, OperatorToken=operator_token, Right=right)


@builder("AssignmentExpression", returns="AssignmentExpressionSyntax")
def assignment_expression(kind: SyntaxKind, left: ExpressionSyntax, right: ExpressionSyntax) -> SyntaxNode:
    return create_node("AssignmentExpression", kind, Left=left, Right=right)


@builder("AssignmentExpression", returns="AssignmentExpressionSyntax")
def assignment_expression_full(
    kind: SyntaxKind, left: ExpressionSyntax, operator_token: SyntaxToken, right: ExpressionSyntax
) -> SyntaxNode:
    return create_node("AssignmentExpression", kind, Left=left, OperatorToken=operator_token, Right=right)


@builder("PrefixUnaryExpression", returns="PrefixUnaryExpressionSyntax")
def prefix_unary_expression(kind: SyntaxKind, operand: ExpressionSyntax) -> SyntaxNode:
    return create_node("PrefixUnaryExpression", kind, Operand=operand)


@builder("PrefixUnaryExpression", returns="PrefixUnaryExpressionSyntax")
def prefix_unary_expression_full(kind: SyntaxKind, operator_token: SyntaxToken, operand: ExpressionSyntax) -> SyntaxNode:
    return create_node("PrefixUnaryExpression", kind, OperatorToken=operator_token, Operand=operand)


@builder("PostfixUnaryExpression", returns="PostfixUnaryExpressionSyntax")
def postfix_unary_expression(kind: SyntaxKind, operand: ExpressionSyntax) -> SyntaxNode:
    return create_node("PostfixUnaryExpression", kind, Operand=operand)


@builder("PostfixUnaryExpression", returns="PostfixUnaryExpressionSyntax")
def postfix_unary_expression_full(kind: SyntaxKind, operand: ExpressionSyntax, operator_token: SyntaxToken) -> SyntaxNode:
    return create_node("PostfixUnaryExpression", kind, Operand=operand, OperatorToken=operator_token)


@builder("CheckedExpression", returns="CheckedExpressionSyntax")
def checked_expression(kind: SyntaxKind, expression: ExpressionSyntax) -> SyntaxNode:
    return create_node("CheckedExpression", kind, Expression=expression)


@builder("CheckedExpression", returns="CheckedExpressionSyntax")
def checked_expression_full(
    kind: SyntaxKind,
    keyword: SyntaxToken,
    open_paren_token: SyntaxToken,
    expression: ExpressionSyntax,
    close_paren_token: SyntaxToken,
) -> SyntaxNode:
    return create_node(
        "CheckedExpression",
        kind,
        Keyword=keyword,
        OpenParenToken=open_paren_token,
        Expression=expression,
        CloseParenToken=close_paren_token,
    )


@builder("LiteralExpression", returns="LiteralExpressionSyntax")
def literal_expression(kind: SyntaxKind) -> SyntaxNode:
    return create_node("LiteralExpression", kind)


@builder("LiteralExpression", returns="LiteralExpressionSyntax")
def literal_expression_with_token(kind: SyntaxKind, token: SyntaxToken) -> SyntaxNode:
    return create_node("LiteralExpression", kind, Token=token)


@builder("ParenthesizedExpression", returns="ParenthesizedExpressionSyntax")
def parenthesized_expression(expression: ExpressionSyntax) -> SyntaxNode:
    return create_node("ParenthesizedExpression", Expression=expression)


@builder("ParenthesizedExpression", returns="ParenthesizedExpressionSyntax")
def parenthesized_expression_full(
    open_paren_token: SyntaxToken, expression: ExpressionSyntax, close_paren_token: SyntaxToken
) -> SyntaxNode:
    return create_node(
        "ParenthesizedExpression",
        OpenParenToken=open_paren_token,
        Expression=expression,
        CloseParenToken=close_paren_token,
    )


@builder("InvocationExpression", returns="InvocationExpressionSyntax")
def invocation_expression(expression: ExpressionSyntax) -> SyntaxNode:
    return create_node("InvocationExpression", Expression=expression, ArgumentList=argument_list())


@builder("InvocationExpression", returns="InvocationExpressionSyntax")
def invocation_expression_with_arguments(
    expression: ExpressionSyntax, argument_list: ArgumentListSyntax
) -> SyntaxNode:
    return create_node("InvocationExpression", Expression=expression, ArgumentList=argument_list)


@builder("ArgumentList", returns="ArgumentListSyntax")
def argument_list(arguments: SeparatedSyntaxList | None = None) -> SyntaxNode:
    return create_node("ArgumentList", Arguments=arguments)


@builder("ArgumentList", returns="ArgumentListSyntax")
def argument_list_full(
    open_paren_token: SyntaxToken, arguments: SeparatedSyntaxList, close_paren_token: SyntaxToken
) -> SyntaxNode:
    return create_node(
        "ArgumentList",
        OpenParenToken=open_paren_token,
        Arguments=arguments,
        CloseParenToken=close_paren_token,
    )


@builder("Argument", returns="ArgumentSyntax")
def argument(expression: ExpressionSyntax) -> SyntaxNode:
    return create_node("Argument", Expression=expression)


@builder("MemberAccessExpression", returns="MemberAccessExpressionSyntax")
def member_access_expression(kind: SyntaxKind, expression: ExpressionSyntax, name: SimpleNameSyntax) -> SyntaxNode:
    return create_node("MemberAccessExpression", kind, Expression=expression, Name=name)


@builder("MemberAccessExpression", returns="MemberAccessExpressionSyntax")
def member_access_expression_full(
    kind: SyntaxKind, expression: ExpressionSyntax, operator_token: SyntaxToken, name: SimpleNameSyntax
) -> SyntaxNode:
    return create_node(
        "MemberAccessExpression", kind, Expression=expression, OperatorToken=operator_token, Name=name
    )


@builder("InterpolatedStringExpression", returns="InterpolatedStringExpressionSyntax")
def interpolated_string_expression(string_start_token: SyntaxToken) -> SyntaxNode:
    return create_node("InterpolatedStringExpression", StringStartToken=string_start_token)


@builder("InterpolatedStringExpression", returns="InterpolatedStringExpressionSyntax")
def interpolated_string_expression_with_contents(string_start_token: SyntaxToken, contents: SyntaxList) -> SyntaxNode:
    return create_node("InterpolatedStringExpression", StringStartToken=string_start_token, Contents=contents)


@builder("InterpolatedStringExpression", returns="InterpolatedStringExpressionSyntax")
def interpolated_string_expression_full(
    string_start_token: SyntaxToken, contents: SyntaxList, string_end_token: SyntaxToken
) -> SyntaxNode:
    return create_node(
        "InterpolatedStringExpression",
        StringStartToken=string_start_token,
        Contents=contents,
        StringEndToken=string_end_token,
    )


@builder("InterpolatedStringText", returns="InterpolatedStringTextSyntax")
def interpolated_string_text() -> SyntaxNode:
    return create_node("InterpolatedStringText")


@builder("InterpolatedStringText", returns="InterpolatedStringTextSyntax")
def interpolated_string_text_with_token(text_token: SyntaxToken) -> SyntaxNode:
    return create_node("InterpolatedStringText", TextToken=text_token)


@builder("Interpolation", returns="InterpolationSyntax")
def interpolation(expression: ExpressionSyntax) -> SyntaxNode:
    return create_node("Interpolation", Expression=expression)


@builder("Interpolation", returns="InterpolationSyntax")
def interpolation_full(
    open_brace_token: SyntaxToken, expression: ExpressionSyntax, close_brace_token: SyntaxToken
) -> SyntaxNode:
    return create_node(
        "Interpolation",
        OpenBraceToken=open_brace_token,
        Expression=expression,
        CloseBraceToken=close_brace_token,
    )


@builder("IfDirectiveTrivia", returns="IfDirectiveTriviaSyntax")
def if_directive_trivia(
    condition: ExpressionSyntax, is_active: bool, branch_taken: bool, condition_value: bool
) -> SyntaxNode:
    return create_node(
        "IfDirectiveTrivia",
        Condition=condition,
        IsActive=is_active,
        BranchTaken=branch_taken,
        ConditionValue=condition_value,
    )


@builder("IfDirectiveTrivia", returns="IfDirectiveTriviaSyntax")
def if_directive_trivia_full(
    hash_token: SyntaxToken,
    if_keyword: SyntaxToken,
    condition: ExpressionSyntax,
    end_of_directive_token: SyntaxToken,
    is_active: bool,
    branch_taken: bool,
    condition_value: bool,
) -> SyntaxNode:
    return create_node(
        "IfDirectiveTrivia",
        HashToken=hash_token,
        IfKeyword=if_keyword,
        Condition=condition,
        EndOfDirectiveToken=end_of_directive_token,
        IsActive=is_active,
        BranchTaken=branch_taken,
        ConditionValue=condition_value,
    )


@builder("ElseDirectiveTrivia", returns="ElseDirectiveTriviaSyntax")
def else_directive_trivia(is_active: bool, branch_taken: bool) -> SyntaxNode:
    return create_node("ElseDirectiveTrivia", IsActive=is_active, BranchTaken=branch_taken)


@builder("ElseDirectiveTrivia", returns="ElseDirectiveTriviaSyntax")
def else_directive_trivia_full(
    hash_token: SyntaxToken,
    else_keyword: SyntaxToken,
    end_of_directive_token: SyntaxToken,
    is_active: bool,
    branch_taken: bool,
) -> SyntaxNode:
    return create_node(
        "ElseDirectiveTrivia",
        HashToken=hash_token,
        ElseKeyword=else_keyword,
        EndOfDirectiveToken=end_of_directive_token,
        IsActive=is_active,
        BranchTaken=branch_taken,
    )


@builder("EndIfDirectiveTrivia", returns="EndIfDirectiveTriviaSyntax")
def end_if_directive_trivia(is_active: bool) -> SyntaxNode:
    return create_node("EndIfDirectiveTrivia", IsActive=is_active)


@builder("EndIfDirectiveTrivia", returns="EndIfDirectiveTriviaSyntax")
def end_if_directive_trivia_full(
    hash_token: SyntaxToken, end_if_keyword: SyntaxToken, end_of_directive_token: SyntaxToken, is_active: bool
) -> SyntaxNode:
    return create_node(
        "EndIfDirectiveTrivia",
        HashToken=hash_token,
        EndIfKeyword=end_if_keyword,
        EndOfDirectiveToken=end_of_directive_token,
        IsActive=is_active,
    )


@builder("RegionDirectiveTrivia", returns="RegionDirectiveTriviaSyntax")
def region_directive_trivia(is_active: bool) -> SyntaxNode:
    return create_node("RegionDirectiveTrivia", IsActive=is_active)


@builder("RegionDirectiveTrivia", returns="RegionDirectiveTriviaSyntax")
def region_directive_trivia_full(
    hash_token: SyntaxToken, region_keyword: SyntaxToken, end_of_directive_token: SyntaxToken, is_active: bool
) -> SyntaxNode:
    return create_node(
        "RegionDirectiveTrivia",
        HashToken=hash_token,
        RegionKeyword=region_keyword,
        EndOfDirectiveToken=end_of_directive_token,
        IsActive=is_active,
    )


@builder("EndRegionDirectiveTrivia", returns="EndRegionDirectiveTriviaSyntax")
def end_region_directive_trivia(is_active: bool) -> SyntaxNode:
    return create_node("EndRegionDirectiveTrivia", IsActive=is_active)


@builder("EndRegionDirectiveTrivia", returns="EndRegionDirectiveTriviaSyntax")
def end_region_directive_trivia_full(
    hash_token: SyntaxToken, end_region_keyword: SyntaxToken, end_of_directive_token: SyntaxToken, is_active: bool
) -> SyntaxNode:
    return create_node(
        "EndRegionDirectiveTrivia",
        HashToken=hash_token,
        EndRegionKeyword=end_region_keyword,
        EndOfDirectiveToken=end_of_directive_token,
        IsActive=is_active,
    )


@builder("BadDirectiveTrivia", returns="BadDirectiveTriviaSyntax")
def bad_directive_trivia(identifier: SyntaxToken, is_active: bool) -> SyntaxNode:
    return create_node("BadDirectiveTrivia", Identifier=identifier, IsActive=is_active)


@builder("BadDirectiveTrivia", returns="BadDirectiveTriviaSyntax")
def bad_directive_trivia_full(
    hash_token: SyntaxToken, identifier: SyntaxToken, end_of_directive_token: SyntaxToken, is_active: bool
) -> SyntaxNode:
    return create_node(
        "BadDirectiveTrivia",
        HashToken=hash_token,
        Identifier=identifier,
        EndOfDirectiveToken=end_of_directive_token,
        IsActive=is_active,
    )


@builder("DocumentationCommentTrivia", returns="DocumentationCommentTriviaSyntax")
def documentation_comment_trivia(kind: SyntaxKind, content: SyntaxList | None = None) -> SyntaxNode:
    return create_node("DocumentationCommentTrivia", kind, Content=content)


@builder("DocumentationCommentTrivia", returns="DocumentationCommentTriviaSyntax")
def documentation_comment_trivia_full(
    kind: SyntaxKind, content: SyntaxList, end_of_comment: SyntaxToken
) -> SyntaxNode:
    return create_node("DocumentationCommentTrivia", kind, Content=content, EndOfComment=end_of_comment)


@builder("XmlText", returns="XmlTextSyntax")
def xml_text() -> SyntaxNode:
    return create_node("XmlText")


@builder("XmlText", returns="XmlTextSyntax")
def xml_text_with_tokens(text_tokens: SyntaxTokenList) -> SyntaxNode:
    return create_node("XmlText", TextTokens=text_tokens)


@builder("SkippedTokensTrivia", returns="SkippedTokensTriviaSyntax")
def skipped_tokens_trivia(tokens: SyntaxTokenList | None = None) -> SyntaxNode:
    return create_node("SkippedTokensTrivia", Tokens=tokens)


