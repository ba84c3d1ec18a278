import pyperf

from tests.parsers.expr import eval as eval_expr
from tests.parsers.heredoc import heredoc

EXPR = " + ".join("({} * 2 - 1)".format(n) for n in range(200))
HEREDOC = "<<EOT\n" + "line\n" * 2000 + "EOT"


runner = pyperf.Runner()
runner.bench_func("expr_parser", lambda: eval_expr(EXPR))
runner.bench_func("heredoc_parser", lambda: heredoc.parse(HEREDOC).unwrap())
