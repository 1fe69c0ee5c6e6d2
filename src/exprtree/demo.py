from .runtime.core import RuntimeContext
from .runtime.expression_evaluator import render
from .runtime.interpreter import run_for_cli
from .snippets import one_plus_two, one_plus_two_plus_four
from .writer import IndentingWriter, indented_output, surrounding_box_title


def run_demo(writer: IndentingWriter | None = None) -> None:
    writer = writer or IndentingWriter()
    context = RuntimeContext(writer=writer)

    with surrounding_box_title(writer, omit_lower_line=True):
        writer.println("SUM EXPRESSIONS")

    for expr in (one_plus_two_plus_four(), one_plus_two()):
        with surrounding_box_title(writer, omit_lower_line=True):
            writer.println(f"evaluate({render(expr)})")
            writer.newline(on_debug_only=True)
            with indented_output(writer):
                value = run_for_cli(expr, context)
            writer.println(f" -> {value}")


if __name__ == "__main__":
    run_demo()
