"""
Generates calltree_calls.py, the fixed-arity call node family.

Python cannot express "a function plus N typed argument nodes" for a
variable N, so every arity from 0 to the configured bound gets its own
class, rendered from a single Mustache template. The output is checked in;
rerun this module after editing calltree_codegen.yaml:

    python -m calltree.calltree_codegen           # rewrite calltree_calls.py
    python -m calltree.calltree_codegen --check   # exit 1 if it is stale
"""
import argparse
import ast
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pystache
import yaml

from calltree.calltree_datatypes import _dbg

DEFAULT_CONFIG_PATH = Path(__file__).with_name("calltree_codegen.yaml")
DEFAULT_OUTPUT_PATH = Path(__file__).with_name("calltree_calls.py")

_CLASS_HEADER = re.compile(r"^class Call(\d+)\(", re.MULTILINE)


class CodegenError(RuntimeError):
    """The call node module could not be generated."""
    pass


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Loads and validates the generator configuration."""
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise CodegenError(f"Cannot load codegen config {config_path}: {e}") from e
    if not isinstance(config, dict):
        raise CodegenError(f"Codegen config {config_path} must be a mapping")
    for key in ("max_arity", "module_template", "class_template"):
        if key not in config:
            raise CodegenError(f"Codegen config {config_path} is missing '{key}'")
    return config


def _check_max_arity(max_arity: Any) -> int:
    if isinstance(max_arity, bool) or not isinstance(max_arity, int):
        raise CodegenError(f"max_arity must be an integer, got {max_arity!r}")
    if max_arity < 0:
        raise CodegenError(f"max_arity must not be negative, got {max_arity}")
    return max_arity


def class_context(arity: int) -> Dict[str, Any]:
    """Template variables for the call node of one arity."""
    names = [f"arg{i}" for i in range(1, arity + 1)]
    type_vars = [f"A{i}" for i in range(1, arity + 1)]
    if arity == 0:
        bases = "CallNode[R]"
    else:
        bases = f"CallNode[R], Generic[R, {', '.join(type_vars)}]"
    unpack = ", ".join(names)
    if arity == 1:
        unpack += ","
    return {
        "arity": str(arity),
        "bases": bases,
        "param_types": ", ".join(type_vars),
        "params": "".join(f", {n}: Node[{t}]" for n, t in zip(names, type_vars)),
        "arg_names": "".join(f", {n}" for n in names),
        "has_args": arity > 0,
        "unpack": unpack,
        "evaluated": ", ".join(f"{n}.evaluate()" for n in names),
    }


def _render(renderer: pystache.Renderer, template: str, context: Dict[str, Any], what: str) -> str:
    try:
        return renderer.render(template, context)
    except Exception as e:
        raise CodegenError(f"Malformed {what}: {e}") from e


def render_call_nodes(max_arity: Optional[int] = None, config: Optional[Dict[str, Any]] = None) -> str:
    """
    Renders the source of the call node module for arities 0..max_arity.

    The result is compiled before it is returned, and must define exactly
    one class per arity, in order; anything else raises CodegenError.
    """
    if config is None:
        config = load_config()
    if max_arity is None:
        max_arity = config["max_arity"]
    max_arity = _check_max_arity(max_arity)
    _dbg("codegen render", "max_arity", max_arity)

    # Generated code must come out verbatim, so no HTML escaping
    renderer = pystache.Renderer(escape=lambda u: u)
    classes: List[str] = []
    for arity in range(max_arity + 1):
        rendered = _render(renderer, config["class_template"], class_context(arity), f"class template (arity {arity})")
        classes.append(rendered.rstrip("\n"))

    source = _render(renderer, config["module_template"], {
        "max_arity": str(max_arity),
        "type_vars": "\n".join(f'A{i} = TypeVar("A{i}")' for i in range(1, max_arity + 1)),
        "classes": "\n\n\n".join(classes),
        "call_nodes": "\n".join(f"    Call{arity}," for arity in range(max_arity + 1)),
    }, "module template")

    found = [int(m) for m in _CLASS_HEADER.findall(source)]
    if found != list(range(max_arity + 1)):
        raise CodegenError(f"Generated classes do not cover arities 0..{max_arity} exactly once: {found}")
    try:
        compile(source, str(DEFAULT_OUTPUT_PATH.name), "exec")
    except SyntaxError as e:
        raise CodegenError(f"Generated call node module does not compile: {e}") from e
    return source


def write_call_nodes(output: Optional[Path] = None, max_arity: Optional[int] = None,
                     config: Optional[Dict[str, Any]] = None) -> Path:
    """Renders the call node module and writes it to output."""
    out_path = Path(output) if output is not None else DEFAULT_OUTPUT_PATH
    source = render_call_nodes(max_arity, config)
    out_path.write_text(source, encoding="utf-8")
    return out_path


def is_up_to_date(path: Optional[Path] = None, max_arity: Optional[int] = None,
                  config: Optional[Dict[str, Any]] = None) -> bool:
    """
    True when the module at path matches what the templates render.
    The comparison is by AST, so reformatting the file does not make it stale.
    """
    target = Path(path) if path is not None else DEFAULT_OUTPUT_PATH
    if not target.exists():
        return False
    expected = ast.dump(ast.parse(render_call_nodes(max_arity, config)))
    try:
        actual = ast.dump(ast.parse(target.read_text(encoding="utf-8")))
    except SyntaxError:
        return False
    return expected == actual


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="calltree.calltree_codegen", description="Generate the call node module.")
    ap.add_argument("--max-arity", type=int, default=None, help="highest arity to generate (default: from config)")
    ap.add_argument("--config", type=Path, default=None, help="codegen YAML config")
    ap.add_argument("--output", type=Path, default=None, help="module to write (default: calltree_calls.py)")
    ap.add_argument("--check", action="store_true", help="only verify the module is up to date")
    args = ap.parse_args(argv)

    try:
        config = load_config(args.config)
        if args.check:
            target = args.output or DEFAULT_OUTPUT_PATH
            if not is_up_to_date(target, args.max_arity, config):
                print(f"{target} is stale; rerun python -m calltree.calltree_codegen", file=sys.stderr)
                return 1
            print(f"{target} is up to date")
            return 0
        out_path = write_call_nodes(args.output, args.max_arity, config)
    except CodegenError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    print(f"wrote {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
