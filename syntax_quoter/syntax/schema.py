from __future__ import annotations

from dataclasses import dataclass

from .kinds import (
    ASSIGNMENT_OPERATORS,
    BINARY_OPERATORS,
    CHECKED_KEYWORDS,
    LITERAL_TOKENS,
    POSTFIX_OPERATORS,
    PREFIX_OPERATORS,
    SyntaxKind,
)

TOKEN = "token"
NODE = "node"
LIST = "list"
SEPARATED = "separated"
TOKENS = "tokens"
BOOL = "bool"
STRING = "str"

RENDERED_SHAPES = frozenset({TOKEN, NODE, LIST, SEPARATED, TOKENS})


@dataclass(frozen=True, slots=True)
class AttributeSpec:
    """One named slot of a node type.

    Attributes:
        name: Public attribute name (``PascalCase``, e.g. ``"OperatorToken"``).
        shape: One of ``token``, ``node``, ``list``, ``separated``, ``tokens``,
            ``bool`` or ``str``.
        element_type: Declared element type tag for list shapes
            (e.g. ``"StatementSyntax"``).
        optional: ``True`` when the slot may hold ``None``.
        derived: ``True`` for computed attributes that are exposed by
            :meth:`SyntaxNode.properties` but never stored.
    """

    name: str
    shape: str
    element_type: str | None = None
    optional: bool = False
    derived: bool = False


@dataclass(frozen=True, slots=True)
class NodeSchema:
    """Per-type schema: which kinds share the type and which slots it carries.

    ``bases`` lists the category tags the type satisfies; builder parameters
    are annotated with these tags (``ExpressionSyntax``, ``StatementSyntax``)
    and the registry matches replay arguments against them.
    """

    name: str
    kinds: tuple[SyntaxKind, ...]
    bases: tuple[str, ...]
    attributes: tuple[AttributeSpec, ...]

    def attribute(self, name: str) -> AttributeSpec:
        for spec in self.attributes:
            if spec.name == name:
                return spec
        raise KeyError(f"{self.name} has no attribute {name!r}")

    def has_attribute(self, name: str) -> bool:
        return any(spec.name == name for spec in self.attributes)

    def index(self, name: str) -> int:
        for idx, spec in enumerate(self.attributes):
            if spec.name == name:
                return idx
        raise KeyError(f"{self.name} has no attribute {name!r}")


def _token(name: str, optional: bool = False) -> AttributeSpec:
    return AttributeSpec(name, TOKEN, optional=optional)


def _node(name: str, optional: bool = False) -> AttributeSpec:
    return AttributeSpec(name, NODE, optional=optional)


def _list(name: str, element_type: str) -> AttributeSpec:
    return AttributeSpec(name, LIST, element_type=element_type)


def _separated(name: str, element_type: str) -> AttributeSpec:
    return AttributeSpec(name, SEPARATED, element_type=element_type)


def _tokens(name: str) -> AttributeSpec:
    return AttributeSpec(name, TOKENS, element_type="SyntaxToken")


def _flag(name: str) -> AttributeSpec:
    return AttributeSpec(name, BOOL)


NODE_SCHEMAS: dict[str, NodeSchema] = {}


def _define(name: str, kinds, bases: tuple[str, ...], *attributes: AttributeSpec) -> None:
    if isinstance(kinds, SyntaxKind):
        kinds = (kinds,)
    NODE_SCHEMAS[name] = NodeSchema(
        name=name,
        kinds=tuple(kinds),
        bases=(f"{name}Syntax", *bases),
        attributes=tuple(attributes),
    )


_EXPRESSION = ("ExpressionSyntax",)
_STATEMENT = ("StatementSyntax",)
_MEMBER = ("MemberDeclarationSyntax",)
_DIRECTIVE = ("DirectiveTriviaSyntax", "StructuredTriviaSyntax")

_define(
    "CompilationUnit",
    SyntaxKind.COMPILATION_UNIT,
    (),
    _list("Members", "MemberDeclarationSyntax"),
    _token("EndOfFileToken"),
)
_define("GlobalStatement", SyntaxKind.GLOBAL_STATEMENT, _MEMBER, _node("Statement"))
_define(
    "ClassDeclaration",
    SyntaxKind.CLASS_DECLARATION,
    ("BaseTypeDeclarationSyntax", *_MEMBER),
    _tokens("Modifiers"),
    _token("Keyword"),
    _token("Identifier"),
    _token("OpenBraceToken"),
    _list("Members", "MemberDeclarationSyntax"),
    _token("CloseBraceToken"),
    _token("SemicolonToken", optional=True),
)
_define(
    "MethodDeclaration",
    SyntaxKind.METHOD_DECLARATION,
    _MEMBER,
    _tokens("Modifiers"),
    _node("ReturnType"),
    _token("Identifier"),
    _node("ParameterList"),
    _node("Body", optional=True),
    _token("SemicolonToken", optional=True),
)
_define(
    "ParameterList",
    SyntaxKind.PARAMETER_LIST,
    (),
    _token("OpenParenToken"),
    _separated("Parameters", "ParameterSyntax"),
    _token("CloseParenToken"),
)
_define(
    "Parameter",
    SyntaxKind.PARAMETER,
    (),
    _node("Type", optional=True),
    _token("Identifier"),
)
_define(
    "Block",
    SyntaxKind.BLOCK,
    _STATEMENT,
    _token("OpenBraceToken"),
    _list("Statements", "StatementSyntax"),
    _token("CloseBraceToken"),
)
_define(
    "ReturnStatement",
    SyntaxKind.RETURN_STATEMENT,
    _STATEMENT,
    _token("ReturnKeyword"),
    _node("Expression", optional=True),
    _token("SemicolonToken"),
)
_define(
    "ExpressionStatement",
    SyntaxKind.EXPRESSION_STATEMENT,
    _STATEMENT,
    _node("Expression"),
    _token("SemicolonToken"),
)
_define(
    "LocalDeclarationStatement",
    SyntaxKind.LOCAL_DECLARATION_STATEMENT,
    _STATEMENT,
    _token("VarKeyword"),
    _token("Identifier"),
    _token("EqualsToken"),
    _node("Value"),
    _token("SemicolonToken"),
)
_define(
    "IfStatement",
    SyntaxKind.IF_STATEMENT,
    _STATEMENT,
    _token("IfKeyword"),
    _token("OpenParenToken"),
    _node("Condition"),
    _token("CloseParenToken"),
    _node("Statement"),
    _node("Else", optional=True),
)
_define(
    "ElseClause",
    SyntaxKind.ELSE_CLAUSE,
    (),
    _token("ElseKeyword"),
    _node("Statement"),
)
_define(
    "WhileStatement",
    SyntaxKind.WHILE_STATEMENT,
    _STATEMENT,
    _token("WhileKeyword"),
    _token("OpenParenToken"),
    _node("Condition"),
    _token("CloseParenToken"),
    _node("Statement"),
)
_define(
    "IdentifierName",
    SyntaxKind.IDENTIFIER_NAME,
    ("SimpleNameSyntax", "TypeSyntax", *_EXPRESSION),
    _token("Identifier"),
)
_define(
    "PredefinedType",
    SyntaxKind.PREDEFINED_TYPE,
    ("TypeSyntax", *_EXPRESSION),
    _token("Keyword"),
)
_define(
    "BinaryExpression",
    tuple(BINARY_OPERATORS),
    _EXPRESSION,
    _node("Left"),
    _token("OperatorToken"),
    _node("Right"),
)
_define(
    "AssignmentExpression",
    tuple(ASSIGNMENT_OPERATORS),
    _EXPRESSION,
    _node("Left"),
    _token("OperatorToken"),
    _node("Right"),
)
_define(
    "LiteralExpression",
    tuple(LITERAL_TOKENS),
    _EXPRESSION,
    _token("Token"),
)
_define(
    "PrefixUnaryExpression",
    tuple(PREFIX_OPERATORS),
    _EXPRESSION,
    _token("OperatorToken"),
    _node("Operand"),
)
_define(
    "PostfixUnaryExpression",
    tuple(POSTFIX_OPERATORS),
    _EXPRESSION,
    _node("Operand"),
    _token("OperatorToken"),
)
_define(
    "CheckedExpression",
    tuple(CHECKED_KEYWORDS),
    _EXPRESSION,
    _token("Keyword"),
    _token("OpenParenToken"),
    _node("Expression"),
    _token("CloseParenToken"),
)
_define(
    "ParenthesizedExpression",
    SyntaxKind.PARENTHESIZED_EXPRESSION,
    _EXPRESSION,
    _token("OpenParenToken"),
    _node("Expression"),
    _token("CloseParenToken"),
)
_define(
    "InvocationExpression",
    SyntaxKind.INVOCATION_EXPRESSION,
    _EXPRESSION,
    _node("Expression"),
    _node("ArgumentList"),
)
_define(
    "ArgumentList",
    SyntaxKind.ARGUMENT_LIST,
    (),
    _token("OpenParenToken"),
    _separated("Arguments", "ArgumentSyntax"),
    _token("CloseParenToken"),
)
_define("Argument", SyntaxKind.ARGUMENT, (), _node("Expression"))
_define(
    "MemberAccessExpression",
    SyntaxKind.SIMPLE_MEMBER_ACCESS_EXPRESSION,
    _EXPRESSION,
    _node("Expression"),
    _token("OperatorToken"),
    _node("Name"),
)
_define(
    "InterpolatedStringExpression",
    SyntaxKind.INTERPOLATED_STRING_EXPRESSION,
    _EXPRESSION,
    _token("StringStartToken"),
    _list("Contents", "InterpolatedStringContentSyntax"),
    _token("StringEndToken"),
)
_define(
    "InterpolatedStringText",
    SyntaxKind.INTERPOLATED_STRING_TEXT,
    ("InterpolatedStringContentSyntax",),
    _token("TextToken"),
)
_define(
    "Interpolation",
    SyntaxKind.INTERPOLATION,
    ("InterpolatedStringContentSyntax",),
    _token("OpenBraceToken"),
    _node("Expression"),
    _token("CloseBraceToken"),
)
_define(
    "IfDirectiveTrivia",
    SyntaxKind.IF_DIRECTIVE_TRIVIA,
    _DIRECTIVE,
    _token("HashToken"),
    _token("IfKeyword"),
    _node("Condition"),
    _token("EndOfDirectiveToken"),
    _flag("IsActive"),
    _flag("BranchTaken"),
    _flag("ConditionValue"),
)
_define(
    "ElseDirectiveTrivia",
    SyntaxKind.ELSE_DIRECTIVE_TRIVIA,
    _DIRECTIVE,
    _token("HashToken"),
    _token("ElseKeyword"),
    _token("EndOfDirectiveToken"),
    _flag("IsActive"),
    _flag("BranchTaken"),
)
_define(
    "EndIfDirectiveTrivia",
    SyntaxKind.END_IF_DIRECTIVE_TRIVIA,
    _DIRECTIVE,
    _token("HashToken"),
    _token("EndIfKeyword"),
    _token("EndOfDirectiveToken"),
    _flag("IsActive"),
)
_define(
    "RegionDirectiveTrivia",
    SyntaxKind.REGION_DIRECTIVE_TRIVIA,
    _DIRECTIVE,
    _token("HashToken"),
    _token("RegionKeyword"),
    _token("EndOfDirectiveToken"),
    _flag("IsActive"),
)
_define(
    "EndRegionDirectiveTrivia",
    SyntaxKind.END_REGION_DIRECTIVE_TRIVIA,
    _DIRECTIVE,
    _token("HashToken"),
    _token("EndRegionKeyword"),
    _token("EndOfDirectiveToken"),
    _flag("IsActive"),
)
_define(
    "BadDirectiveTrivia",
    SyntaxKind.BAD_DIRECTIVE_TRIVIA,
    _DIRECTIVE,
    _token("HashToken"),
    _token("Identifier"),
    _token("EndOfDirectiveToken"),
    _flag("IsActive"),
)
_define(
    "DocumentationCommentTrivia",
    (
        SyntaxKind.SINGLE_LINE_DOCUMENTATION_COMMENT_TRIVIA,
        SyntaxKind.MULTI_LINE_DOCUMENTATION_COMMENT_TRIVIA,
    ),
    ("StructuredTriviaSyntax",),
    _list("Content", "XmlNodeSyntax"),
    _token("EndOfComment"),
)
_define("XmlText", SyntaxKind.XML_TEXT, ("XmlNodeSyntax",), _tokens("TextTokens"))
_define(
    "SkippedTokensTrivia",
    SyntaxKind.SKIPPED_TOKENS_TRIVIA,
    ("StructuredTriviaSyntax",),
    _tokens("Tokens"),
)

SCHEMA_BY_KIND: dict[SyntaxKind, NodeSchema] = {
    kind: schema for schema in NODE_SCHEMAS.values() for kind in schema.kinds
}


def schema_for_kind(kind: SyntaxKind) -> NodeSchema:
    try:
        return SCHEMA_BY_KIND[kind]
    except KeyError:
        raise KeyError(f"No node type declares kind {kind.value!r}") from None
