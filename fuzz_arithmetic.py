import ast
import math
import random
import re
import string
import warnings

from shap.parser import parse
from shap.runtime import evaluate

warnings.filterwarnings("ignore")


class FmodRewriter(ast.NodeTransformer):
    """Turns `a % b` into `fmod(a, b)`: shap's remainder takes the sign of the dividend, python's of the divisor."""

    def visit_BinOp(self, node: ast.BinOp) -> ast.AST:
        self.generic_visit(node)
        if isinstance(node.op, ast.Mod):
            call = ast.Call(func=ast.Name(id="fmod", ctx=ast.Load()), args=[node.left, node.right], keywords=[])
            return ast.copy_location(call, node)
        return node


def eval_py(code: str) -> float | str:
    try:
        tree = ast.fix_missing_locations(FmodRewriter().visit(ast.parse(code, mode="eval")))
        return eval(compile(tree, "<fuzz>", "eval"), {"fmod": math.fmod})
    except Exception as e:
        return str(e)


def eval_my(code: str) -> float | str:
    try:
        return evaluate(parse(code + ";"))[0]
    except Exception as e:
        return str(e)


if __name__ == "__main__":
    alphabet = string.digits + ".()+-*/% "

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)

        if re.findall(r"\*\s*\*", code):
            continue  # avoid generating powers (10**4)

        if re.findall(r"/\s*/", code):
            continue  # avoid generating int devision (10 // 3)

        if re.findall(r"(^|[-+*/%(])\s*\+", code):
            continue  # python accepts unary plus, shap does not

        if re.findall(r"\d\.(?!\d)|(?<!\d)\.\d", code):
            continue  # python accepts "3." and ".5", shap rejects both

        res_py = eval_py(code)
        res_my = eval_my(code)
        if isinstance(res_py, float) and isinstance(res_my, float) and math.isclose(res_my, res_py):
            continue
        if isinstance(res_py, int) and isinstance(res_my, float) and math.isclose(float(res_py), res_my):
            continue
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue
        if isinstance(res_py, str) and res_py.startswith("leading zeros in decimal integer literals are not permitted"):
            continue
        if isinstance(res_py, str) and "division by zero" in res_py and isinstance(res_my, float):
            continue  # shap follows IEEE-754 here
        if isinstance(res_py, str) and "math domain error" in res_py and isinstance(res_my, float) and math.isnan(res_my):
            continue  # fmod by zero
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
