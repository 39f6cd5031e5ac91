"""AST-level validation of docstring sections across the repository."""

from __future__ import annotations

import ast
import unittest
from collections.abc import Iterator
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]
SCAN_ROOTS = ("src", "examples", "tests")
IGNORED_PARAM_NAMES = {"self", "cls"}

CallableNode = ast.FunctionDef | ast.AsyncFunctionDef


def _sections(docstring: str) -> set[str]:
    """Collect Google-style section headers from a docstring.

    Args:
        docstring: Full docstring text.

    Returns:
        Header names without the trailing colon.
    """
    headers: set[str] = set()
    for line in docstring.splitlines():
        stripped = line.strip()
        if stripped.endswith(":") and stripped[:-1].isalpha():
            headers.add(stripped[:-1])
    return headers


def _parameter_names(node: CallableNode) -> list[str]:
    """List parameter names other than ``self``/``cls``.

    Args:
        node: Function or method node.

    Returns:
        Relevant parameter names.
    """
    args = node.args
    names = [arg.arg for arg in (*args.posonlyargs, *args.args, *args.kwonlyargs)]
    names.extend(extra.arg for extra in (args.vararg, args.kwarg) if extra is not None)
    return [name for name in names if name not in IGNORED_PARAM_NAMES]


def _returns_value(node: CallableNode) -> bool:
    """Check whether the return annotation promises a value.

    Args:
        node: Function or method node.

    Returns:
        ``True`` if the annotation exists and is not ``None``.
    """
    returns = node.returns
    if returns is None:
        return False
    if isinstance(returns, ast.Constant) and returns.value is None:
        return False
    return not (isinstance(returns, ast.Name) and returns.id == "None")


def _raises_directly(node: CallableNode) -> bool:
    """Check for ``raise`` statements in a callable, ignoring nested scopes.

    Args:
        node: Function or method node.

    Returns:
        ``True`` if the body raises an exception itself.
    """
    pending: list[ast.AST] = list(node.body)
    while pending:
        current = pending.pop()
        if isinstance(current, ast.Raise):
            return True
        if isinstance(current, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef, ast.Lambda)):
            continue
        pending.extend(ast.iter_child_nodes(current))
    return False


def _public_callables(tree: ast.Module) -> Iterator[tuple[str, CallableNode]]:
    """Yield module-level functions and class methods with qualified names.

    Args:
        tree: Parsed module.

    Yields:
        ``(qualified_name, node)`` pairs.
    """
    for node in tree.body:
        if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)):
            yield node.name, node
        elif isinstance(node, ast.ClassDef):
            for member in node.body:
                if isinstance(member, (ast.FunctionDef, ast.AsyncFunctionDef)):
                    yield f"{node.name}.{member.name}", member


class DocstringContractTests(unittest.TestCase):
    """Require summary, Args, Returns, and Raises sections where they apply."""

    def test_docstring_contracts(self) -> None:
        """Scan every Python file under the source, example, and test roots."""
        violations: list[str] = []
        for root_name in SCAN_ROOTS:
            root = REPO_ROOT / root_name
            if not root.exists():
                continue
            for path in sorted(root.rglob("*.py")):
                tree = ast.parse(path.read_text(encoding="utf-8"))
                violations.extend(self._module_violations(tree, path.relative_to(REPO_ROOT)))

        if violations:
            formatted = "\n".join(f"- {item}" for item in violations)
            self.fail(f"Docstring contract violations:\n{formatted}")

    def _module_violations(self, tree: ast.Module, path: Path) -> list[str]:
        """Collect docstring violations for one module.

        Args:
            tree: Parsed module.
            path: Repository-relative module path.

        Returns:
            Human-readable violation descriptions.
        """
        found: list[str] = []
        if ast.get_docstring(tree) is None:
            found.append(f"{path} missing module docstring")

        for node in tree.body:
            if isinstance(node, ast.ClassDef) and ast.get_docstring(node) is None:
                found.append(f"{path}:{node.lineno} missing class docstring for `{node.name}`")

        for name, node in _public_callables(tree):
            doc = ast.get_docstring(node)
            if doc is None:
                found.append(f"{path}:{node.lineno} missing docstring for `{name}`")
                continue
            sections = _sections(doc)
            if _parameter_names(node) and "Args" not in sections:
                found.append(f"{path}:{node.lineno} missing Args for `{name}`")
            if _returns_value(node) and not sections & {"Returns", "Yields"}:
                found.append(f"{path}:{node.lineno} missing Returns for `{name}`")
            if _raises_directly(node) and "Raises" not in sections:
                found.append(f"{path}:{node.lineno} missing Raises for `{name}`")
        return found


if __name__ == "__main__":
    unittest.main()
