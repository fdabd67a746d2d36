from shap.lexer import tokenize
from shap.parser import Parser
from shap.runtime import evaluate
from shap.diagnostics import SourceError

for code in [
    "5;",
    "-1;",
    "1 + 1;",
    "-1 + 1;",
    "1 + -1;",
    "4 + 6 * 3;",
    "(4 + 6);",
    "(4+6) * 3;",
    "- -3;",
    "7 % 3; -7 % 3;",
    "1 / 0; -1 / 0; 0 / 0;",
    "10 / 5/ 2;",
    "1 + 1",
    "1 + @;",
    "3.;",
    "is negative;",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = tokenize(code)
    except SourceError as e:
        print(e.render(code))
        continue

    print(f"tokens: {' '.join(str(t) for t in tokens)}")

    try:
        stmts = Parser(code).parse()
    except SourceError as e:
        print(e.render(code))
        continue
    stmts_str = "\n".join(f" {i + 1:> 2}: {stmt}" for i, stmt in enumerate(stmts))
    print(f"ast:\n{stmts_str}")

    results = evaluate(stmts)
    results_str = "\n".join(f" {i + 1:> 2}: {res}" for i, res in enumerate(results))
    print(f"statement results:\n{results_str}")
