from __future__ import annotations

from enum import Enum


class SyntaxKind(Enum):
    NONE = "None"

    # Punctuation
    OPEN_BRACE_TOKEN = "OpenBraceToken"
    CLOSE_BRACE_TOKEN = "CloseBraceToken"
    OPEN_PAREN_TOKEN = "OpenParenToken"
    CLOSE_PAREN_TOKEN = "CloseParenToken"
    SEMICOLON_TOKEN = "SemicolonToken"
    COMMA_TOKEN = "CommaToken"
    DOT_TOKEN = "DotToken"
    EQUALS_TOKEN = "EqualsToken"
    PLUS_TOKEN = "PlusToken"
    MINUS_TOKEN = "MinusToken"
    ASTERISK_TOKEN = "AsteriskToken"
    SLASH_TOKEN = "SlashToken"
    LESS_THAN_TOKEN = "LessThanToken"
    GREATER_THAN_TOKEN = "GreaterThanToken"
    EQUALS_EQUALS_TOKEN = "EqualsEqualsToken"
    EXCLAMATION_EQUALS_TOKEN = "ExclamationEqualsToken"
    EXCLAMATION_TOKEN = "ExclamationToken"
    AMPERSAND_AMPERSAND_TOKEN = "AmpersandAmpersandToken"
    BAR_BAR_TOKEN = "BarBarToken"
    PLUS_PLUS_TOKEN = "PlusPlusToken"
    MINUS_MINUS_TOKEN = "MinusMinusToken"
    PLUS_EQUALS_TOKEN = "PlusEqualsToken"
    MINUS_EQUALS_TOKEN = "MinusEqualsToken"
    HASH_TOKEN = "HashToken"
    INTERPOLATED_STRING_START_TOKEN = "InterpolatedStringStartToken"
    INTERPOLATED_STRING_END_TOKEN = "InterpolatedStringEndToken"

    # Keywords
    CLASS_KEYWORD = "ClassKeyword"
    PUBLIC_KEYWORD = "PublicKeyword"
    PRIVATE_KEYWORD = "PrivateKeyword"
    STATIC_KEYWORD = "StaticKeyword"
    RETURN_KEYWORD = "ReturnKeyword"
    IF_KEYWORD = "IfKeyword"
    ELSE_KEYWORD = "ElseKeyword"
    WHILE_KEYWORD = "WhileKeyword"
    VAR_KEYWORD = "VarKeyword"
    TRUE_KEYWORD = "TrueKeyword"
    FALSE_KEYWORD = "FalseKeyword"
    NULL_KEYWORD = "NullKeyword"
    VOID_KEYWORD = "VoidKeyword"
    INT_KEYWORD = "IntKeyword"
    STRING_KEYWORD = "StringKeyword"
    BOOL_KEYWORD = "BoolKeyword"
    CHECKED_KEYWORD = "CheckedKeyword"
    UNCHECKED_KEYWORD = "UncheckedKeyword"
    ENDIF_KEYWORD = "EndIfKeyword"
    REGION_KEYWORD = "RegionKeyword"
    ENDREGION_KEYWORD = "EndRegionKeyword"

    # Tokens with variable text
    IDENTIFIER_TOKEN = "IdentifierToken"
    NUMERIC_LITERAL_TOKEN = "NumericLiteralToken"
    STRING_LITERAL_TOKEN = "StringLiteralToken"
    CHARACTER_LITERAL_TOKEN = "CharacterLiteralToken"
    INTERPOLATED_STRING_TEXT_TOKEN = "InterpolatedStringTextToken"
    XML_TEXT_LITERAL_TOKEN = "XmlTextLiteralToken"
    XML_TEXT_LITERAL_NEW_LINE_TOKEN = "XmlTextLiteralNewLineToken"
    XML_ENTITY_LITERAL_TOKEN = "XmlEntityLiteralToken"
    BAD_TOKEN = "BadToken"
    END_OF_DIRECTIVE_TOKEN = "EndOfDirectiveToken"
    END_OF_DOCUMENTATION_COMMENT_TOKEN = "EndOfDocumentationCommentToken"
    END_OF_FILE_TOKEN = "EndOfFileToken"

    # Trivia
    WHITESPACE_TRIVIA = "WhitespaceTrivia"
    END_OF_LINE_TRIVIA = "EndOfLineTrivia"
    SINGLE_LINE_COMMENT_TRIVIA = "SingleLineCommentTrivia"
    MULTI_LINE_COMMENT_TRIVIA = "MultiLineCommentTrivia"
    SINGLE_LINE_DOCUMENTATION_COMMENT_TRIVIA = "SingleLineDocumentationCommentTrivia"
    MULTI_LINE_DOCUMENTATION_COMMENT_TRIVIA = "MultiLineDocumentationCommentTrivia"
    DOCUMENTATION_COMMENT_EXTERIOR_TRIVIA = "DocumentationCommentExteriorTrivia"
    PREPROCESSING_MESSAGE_TRIVIA = "PreprocessingMessageTrivia"
    DISABLED_TEXT_TRIVIA = "DisabledTextTrivia"
    SKIPPED_TOKENS_TRIVIA = "SkippedTokensTrivia"
    IF_DIRECTIVE_TRIVIA = "IfDirectiveTrivia"
    ELSE_DIRECTIVE_TRIVIA = "ElseDirectiveTrivia"
    END_IF_DIRECTIVE_TRIVIA = "EndIfDirectiveTrivia"
    REGION_DIRECTIVE_TRIVIA = "RegionDirectiveTrivia"
    END_REGION_DIRECTIVE_TRIVIA = "EndRegionDirectiveTrivia"
    BAD_DIRECTIVE_TRIVIA = "BadDirectiveTrivia"

    # Nodes
    COMPILATION_UNIT = "CompilationUnit"
    GLOBAL_STATEMENT = "GlobalStatement"
    CLASS_DECLARATION = "ClassDeclaration"
    METHOD_DECLARATION = "MethodDeclaration"
    PARAMETER_LIST = "ParameterList"
    PARAMETER = "Parameter"
    BLOCK = "Block"
    RETURN_STATEMENT = "ReturnStatement"
    EXPRESSION_STATEMENT = "ExpressionStatement"
    LOCAL_DECLARATION_STATEMENT = "LocalDeclarationStatement"
    IF_STATEMENT = "IfStatement"
    ELSE_CLAUSE = "ElseClause"
    WHILE_STATEMENT = "WhileStatement"
    IDENTIFIER_NAME = "IdentifierName"
    PREDEFINED_TYPE = "PredefinedType"
    ADD_EXPRESSION = "AddExpression"
    SUBTRACT_EXPRESSION = "SubtractExpression"
    MULTIPLY_EXPRESSION = "MultiplyExpression"
    DIVIDE_EXPRESSION = "DivideExpression"
    LESS_THAN_EXPRESSION = "LessThanExpression"
    GREATER_THAN_EXPRESSION = "GreaterThanExpression"
    EQUALS_EXPRESSION = "EqualsExpression"
    NOT_EQUALS_EXPRESSION = "NotEqualsExpression"
    LOGICAL_AND_EXPRESSION = "LogicalAndExpression"
    LOGICAL_OR_EXPRESSION = "LogicalOrExpression"
    SIMPLE_ASSIGNMENT_EXPRESSION = "SimpleAssignmentExpression"
    ADD_ASSIGNMENT_EXPRESSION = "AddAssignmentExpression"
    SUBTRACT_ASSIGNMENT_EXPRESSION = "SubtractAssignmentExpression"
    NUMERIC_LITERAL_EXPRESSION = "NumericLiteralExpression"
    STRING_LITERAL_EXPRESSION = "StringLiteralExpression"
    CHARACTER_LITERAL_EXPRESSION = "CharacterLiteralExpression"
    TRUE_LITERAL_EXPRESSION = "TrueLiteralExpression"
    FALSE_LITERAL_EXPRESSION = "FalseLiteralExpression"
    NULL_LITERAL_EXPRESSION = "NullLiteralExpression"
    UNARY_MINUS_EXPRESSION = "UnaryMinusExpression"
    LOGICAL_NOT_EXPRESSION = "LogicalNotExpression"
    PRE_INCREMENT_EXPRESSION = "PreIncrementExpression"
    PRE_DECREMENT_EXPRESSION = "PreDecrementExpression"
    POST_INCREMENT_EXPRESSION = "PostIncrementExpression"
    POST_DECREMENT_EXPRESSION = "PostDecrementExpression"
    CHECKED_EXPRESSION = "CheckedExpression"
    UNCHECKED_EXPRESSION = "UncheckedExpression"
    PARENTHESIZED_EXPRESSION = "ParenthesizedExpression"
    INVOCATION_EXPRESSION = "InvocationExpression"
    ARGUMENT_LIST = "ArgumentList"
    ARGUMENT = "Argument"
    SIMPLE_MEMBER_ACCESS_EXPRESSION = "SimpleMemberAccessExpression"
    INTERPOLATED_STRING_EXPRESSION = "InterpolatedStringExpression"
    INTERPOLATED_STRING_TEXT = "InterpolatedStringText"
    INTERPOLATION = "Interpolation"
    XML_TEXT = "XmlText"


TOKEN_TEXT: dict[SyntaxKind, str] = {
    SyntaxKind.OPEN_BRACE_TOKEN: "{",
    SyntaxKind.CLOSE_BRACE_TOKEN: "}",
    SyntaxKind.OPEN_PAREN_TOKEN: "(",
    SyntaxKind.CLOSE_PAREN_TOKEN: ")",
    SyntaxKind.SEMICOLON_TOKEN: ";",
    SyntaxKind.COMMA_TOKEN: ",",
    SyntaxKind.DOT_TOKEN: ".",
    SyntaxKind.EQUALS_TOKEN: "=",
    SyntaxKind.PLUS_TOKEN: "+",
    SyntaxKind.MINUS_TOKEN: "-",
    SyntaxKind.ASTERISK_TOKEN: "*",
    SyntaxKind.SLASH_TOKEN: "/",
    SyntaxKind.LESS_THAN_TOKEN: "<",
    SyntaxKind.GREATER_THAN_TOKEN: ">",
    SyntaxKind.EQUALS_EQUALS_TOKEN: "==",
    SyntaxKind.EXCLAMATION_EQUALS_TOKEN: "!=",
    SyntaxKind.EXCLAMATION_TOKEN: "!",
    SyntaxKind.AMPERSAND_AMPERSAND_TOKEN: "&&",
    SyntaxKind.BAR_BAR_TOKEN: "||",
    SyntaxKind.PLUS_PLUS_TOKEN: "++",
    SyntaxKind.MINUS_MINUS_TOKEN: "--",
    SyntaxKind.PLUS_EQUALS_TOKEN: "+=",
    SyntaxKind.MINUS_EQUALS_TOKEN: "-=",
    SyntaxKind.HASH_TOKEN: "#",
    SyntaxKind.INTERPOLATED_STRING_START_TOKEN: '$"',
    SyntaxKind.INTERPOLATED_STRING_END_TOKEN: '"',
    SyntaxKind.CLASS_KEYWORD: "class",
    SyntaxKind.PUBLIC_KEYWORD: "public",
    SyntaxKind.PRIVATE_KEYWORD: "private",
    SyntaxKind.STATIC_KEYWORD: "static",
    SyntaxKind.RETURN_KEYWORD: "return",
    SyntaxKind.IF_KEYWORD: "if",
    SyntaxKind.ELSE_KEYWORD: "else",
    SyntaxKind.WHILE_KEYWORD: "while",
    SyntaxKind.VAR_KEYWORD: "var",
    SyntaxKind.TRUE_KEYWORD: "true",
    SyntaxKind.FALSE_KEYWORD: "false",
    SyntaxKind.NULL_KEYWORD: "null",
    SyntaxKind.VOID_KEYWORD: "void",
    SyntaxKind.INT_KEYWORD: "int",
    SyntaxKind.STRING_KEYWORD: "string",
    SyntaxKind.BOOL_KEYWORD: "bool",
    SyntaxKind.CHECKED_KEYWORD: "checked",
    SyntaxKind.UNCHECKED_KEYWORD: "unchecked",
    SyntaxKind.ENDIF_KEYWORD: "endif",
    SyntaxKind.REGION_KEYWORD: "region",
    SyntaxKind.ENDREGION_KEYWORD: "endregion",
    SyntaxKind.END_OF_DIRECTIVE_TOKEN: "",
    SyntaxKind.END_OF_DOCUMENTATION_COMMENT_TOKEN: "",
    SyntaxKind.END_OF_FILE_TOKEN: "",
}

KEYWORDS: dict[str, SyntaxKind] = {
    TOKEN_TEXT[kind]: kind
    for kind in (
        SyntaxKind.CLASS_KEYWORD,
        SyntaxKind.PUBLIC_KEYWORD,
        SyntaxKind.PRIVATE_KEYWORD,
        SyntaxKind.STATIC_KEYWORD,
        SyntaxKind.RETURN_KEYWORD,
        SyntaxKind.IF_KEYWORD,
        SyntaxKind.ELSE_KEYWORD,
        SyntaxKind.WHILE_KEYWORD,
        SyntaxKind.VAR_KEYWORD,
        SyntaxKind.TRUE_KEYWORD,
        SyntaxKind.FALSE_KEYWORD,
        SyntaxKind.NULL_KEYWORD,
        SyntaxKind.VOID_KEYWORD,
        SyntaxKind.INT_KEYWORD,
        SyntaxKind.STRING_KEYWORD,
        SyntaxKind.BOOL_KEYWORD,
        SyntaxKind.CHECKED_KEYWORD,
        SyntaxKind.UNCHECKED_KEYWORD,
    )
}

# Only recognised right after '#'.
DIRECTIVE_KEYWORDS: dict[str, SyntaxKind] = {
    "if": SyntaxKind.IF_KEYWORD,
    "else": SyntaxKind.ELSE_KEYWORD,
    "endif": SyntaxKind.ENDIF_KEYWORD,
    "region": SyntaxKind.REGION_KEYWORD,
    "endregion": SyntaxKind.ENDREGION_KEYWORD,
}

MODIFIER_KEYWORDS = frozenset(
    {SyntaxKind.PUBLIC_KEYWORD, SyntaxKind.PRIVATE_KEYWORD, SyntaxKind.STATIC_KEYWORD}
)

PREDEFINED_TYPE_KEYWORDS = frozenset(
    {
        SyntaxKind.VOID_KEYWORD,
        SyntaxKind.INT_KEYWORD,
        SyntaxKind.STRING_KEYWORD,
        SyntaxKind.BOOL_KEYWORD,
    }
)

BINARY_OPERATORS: dict[SyntaxKind, SyntaxKind] = {
    SyntaxKind.ADD_EXPRESSION: SyntaxKind.PLUS_TOKEN,
    SyntaxKind.SUBTRACT_EXPRESSION: SyntaxKind.MINUS_TOKEN,
    SyntaxKind.MULTIPLY_EXPRESSION: SyntaxKind.ASTERISK_TOKEN,
    SyntaxKind.DIVIDE_EXPRESSION: SyntaxKind.SLASH_TOKEN,
    SyntaxKind.LESS_THAN_EXPRESSION: SyntaxKind.LESS_THAN_TOKEN,
    SyntaxKind.GREATER_THAN_EXPRESSION: SyntaxKind.GREATER_THAN_TOKEN,
    SyntaxKind.EQUALS_EXPRESSION: SyntaxKind.EQUALS_EQUALS_TOKEN,
    SyntaxKind.NOT_EQUALS_EXPRESSION: SyntaxKind.EXCLAMATION_EQUALS_TOKEN,
    SyntaxKind.LOGICAL_AND_EXPRESSION: SyntaxKind.AMPERSAND_AMPERSAND_TOKEN,
    SyntaxKind.LOGICAL_OR_EXPRESSION: SyntaxKind.BAR_BAR_TOKEN,
}

ASSIGNMENT_OPERATORS: dict[SyntaxKind, SyntaxKind] = {
    SyntaxKind.SIMPLE_ASSIGNMENT_EXPRESSION: SyntaxKind.EQUALS_TOKEN,
    SyntaxKind.ADD_ASSIGNMENT_EXPRESSION: SyntaxKind.PLUS_EQUALS_TOKEN,
    SyntaxKind.SUBTRACT_ASSIGNMENT_EXPRESSION: SyntaxKind.MINUS_EQUALS_TOKEN,
}

PREFIX_OPERATORS: dict[SyntaxKind, SyntaxKind] = {
    SyntaxKind.UNARY_MINUS_EXPRESSION: SyntaxKind.MINUS_TOKEN,
    SyntaxKind.LOGICAL_NOT_EXPRESSION: SyntaxKind.EXCLAMATION_TOKEN,
    SyntaxKind.PRE_INCREMENT_EXPRESSION: SyntaxKind.PLUS_PLUS_TOKEN,
    SyntaxKind.PRE_DECREMENT_EXPRESSION: SyntaxKind.MINUS_MINUS_TOKEN,
}

POSTFIX_OPERATORS: dict[SyntaxKind, SyntaxKind] = {
    SyntaxKind.POST_INCREMENT_EXPRESSION: SyntaxKind.PLUS_PLUS_TOKEN,
    SyntaxKind.POST_DECREMENT_EXPRESSION: SyntaxKind.MINUS_MINUS_TOKEN,
}

CHECKED_KEYWORDS: dict[SyntaxKind, SyntaxKind] = {
    SyntaxKind.CHECKED_EXPRESSION: SyntaxKind.CHECKED_KEYWORD,
    SyntaxKind.UNCHECKED_EXPRESSION: SyntaxKind.UNCHECKED_KEYWORD,
}

LITERAL_TOKENS: dict[SyntaxKind, SyntaxKind] = {
    SyntaxKind.NUMERIC_LITERAL_EXPRESSION: SyntaxKind.NUMERIC_LITERAL_TOKEN,
    SyntaxKind.STRING_LITERAL_EXPRESSION: SyntaxKind.STRING_LITERAL_TOKEN,
    SyntaxKind.CHARACTER_LITERAL_EXPRESSION: SyntaxKind.CHARACTER_LITERAL_TOKEN,
    SyntaxKind.TRUE_LITERAL_EXPRESSION: SyntaxKind.TRUE_KEYWORD,
    SyntaxKind.FALSE_LITERAL_EXPRESSION: SyntaxKind.FALSE_KEYWORD,
    SyntaxKind.NULL_LITERAL_EXPRESSION: SyntaxKind.NULL_KEYWORD,
}

DIRECTIVE_TRIVIA_KINDS = frozenset(
    {
        SyntaxKind.IF_DIRECTIVE_TRIVIA,
        SyntaxKind.ELSE_DIRECTIVE_TRIVIA,
        SyntaxKind.END_IF_DIRECTIVE_TRIVIA,
        SyntaxKind.REGION_DIRECTIVE_TRIVIA,
        SyntaxKind.END_REGION_DIRECTIVE_TRIVIA,
        SyntaxKind.BAD_DIRECTIVE_TRIVIA,
    }
)

DOCUMENTATION_COMMENT_KINDS = frozenset(
    {
        SyntaxKind.SINGLE_LINE_DOCUMENTATION_COMMENT_TRIVIA,
        SyntaxKind.MULTI_LINE_DOCUMENTATION_COMMENT_TRIVIA,
    }
)


def token_text(kind: SyntaxKind) -> str:
    """Return the fixed text of a punctuation/keyword token kind."""

    try:
        return TOKEN_TEXT[kind]
    except KeyError:
        raise ValueError(f"{kind.value} has no fixed text") from None


def has_fixed_text(kind: SyntaxKind) -> bool:
    return kind in TOKEN_TEXT


def is_keyword(kind: SyntaxKind) -> bool:
    return kind.value.endswith("Keyword")
