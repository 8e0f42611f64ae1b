"""Tests for the interpreter."""

import io

import pytest

from just_tcl import Builtin, ErrorKind, Result, Signal, Tcl


FACT = """
proc fact {x} {
    if {== $x 0} {
        return 1
    }
    return [* [fact [- $x 1]] $x]
}
"""


class TestBasicExecution:
    """Test basic script execution."""

    def test_arithmetic(self):
        tcl = Tcl()
        assert tcl.eval("+ 2 3") == Result("5", Signal.NORMAL)

    def test_set_and_puts(self):
        tcl = Tcl()
        result = tcl.run("set x 5; puts $x")
        assert result.stdout == "5\n"
        assert result.exit_code == 0
        assert tcl.env["x"] == "5"

    def test_variable_persists_across_runs(self):
        tcl = Tcl()
        tcl.run("set x 5")
        assert tcl.eval("+ $x 1").value == "6"

    def test_value_of_last_command(self):
        tcl = Tcl()
        assert tcl.eval("set a 1; set b 2").value == "2"
        assert tcl.run("set c 3").result == "3"

    def test_empty_script(self):
        tcl = Tcl()
        assert tcl.eval("") == Result("", Signal.NORMAL)
        assert tcl.eval("  \n # just a comment\n").value == ""

    def test_puts_returns_empty(self):
        tcl = Tcl()
        assert tcl.run("puts hi").result == ""

    def test_output_sink(self):
        sink = io.StringIO()
        tcl = Tcl(output=sink)
        result = tcl.run("puts one; puts two")
        assert sink.getvalue() == "one\ntwo\n"
        assert result.stdout == ""

    def test_run_restores_output_sink(self):
        tcl = Tcl()
        before = tcl.output
        assert tcl.run("puts one").stdout == "one\n"
        assert tcl.output is before
        tcl.eval("puts stray")
        assert tcl.run("puts two").stdout == "two\n"

    def test_run_restores_output_sink_after_error(self):
        tcl = Tcl()
        before = tcl.output
        assert tcl.run("puts one; nosuch").exit_code == 1
        assert tcl.output is before

    def test_initial_env(self):
        tcl = Tcl(env={"name": "World"})
        assert tcl.run('puts "Hello, $name!"').stdout == "Hello, World!\n"


class TestSubstitution:
    """Test variable, command and backslash substitution."""

    def test_command_substitution(self):
        tcl = Tcl()
        assert tcl.run("puts [+ 1 [* 2 3]]").stdout == "7\n"

    def test_substitution_inside_quotes(self):
        tcl = Tcl()
        result = tcl.run('set n 3; puts "[+ $n 1] items for $n"')
        assert result.stdout == "4 items for 3\n"

    def test_no_substitution_inside_braces(self):
        tcl = Tcl()
        assert tcl.run("puts {$x [y]}").stdout == "$x [y]\n"

    def test_interpolated_word(self):
        tcl = Tcl()
        assert tcl.run("set a 1; set b 2; puts x$a-[+ $a $b]y").stdout == "x1-3y\n"

    def test_braced_variable_name(self):
        tcl = Tcl()
        assert tcl.run("set {my var} 7; puts ${my var}").stdout == "7\n"

    def test_escapes(self):
        tcl = Tcl()
        assert tcl.run('puts "a\\tb"').stdout == "a\tb\n"
        assert tcl.run("puts \\$x").stdout == "$x\n"
        assert tcl.run("puts \\[x\\]").stdout == "[x]\n"

    def test_substituted_value_is_not_resubstituted(self):
        tcl = Tcl()
        result = tcl.run("set x {$y [boom]}; set z $x; puts $z")
        assert result.stdout == "$y [boom]\n"

    def test_comments(self):
        tcl = Tcl()
        result = tcl.run("# leading comment\nputs a ;# trailing\n  # indented\nputs b")
        assert result.stdout == "a\nb\n"


class TestProcedures:
    """Test proc definition and calls."""

    def test_square(self):
        tcl = Tcl()
        tcl.run("proc square {x} { * $x $x }")
        assert tcl.eval("square 5") == Result("25", Signal.NORMAL)

    def test_proc_definition_returns_empty(self):
        tcl = Tcl()
        assert tcl.eval("proc f {} { return 1 }") == Result("", Signal.NORMAL)

    def test_factorial(self):
        tcl = Tcl()
        tcl.run(FACT)
        assert tcl.eval("fact 5").value == "120"
        assert tcl.eval("fact 0").value == "1"

    def test_return_round_trip(self):
        tcl = Tcl()
        tcl.run("proc f {a} { return $a }")
        assert tcl.eval('f "hello world"') == Result("hello world", Signal.NORMAL)

    def test_return_without_value(self):
        tcl = Tcl()
        tcl.run("proc f {} { return; puts unreachable }")
        result = tcl.run("f")
        assert result.result == ""
        assert result.stdout == ""

    def test_body_value_without_return(self):
        tcl = Tcl()
        tcl.run("proc f {a b} { set c [+ $a $b]; - $c 1 }")
        assert tcl.eval("f 2 3").value == "4"

    def test_locals_do_not_leak(self):
        tcl = Tcl()
        tcl.run("proc f {} { set inner 1; return ok }")
        assert tcl.eval("f").value == "ok"
        result = tcl.eval("puts $inner")
        assert result.signal is Signal.ERROR
        assert result.kind is ErrorKind.UNDEFINED_VARIABLE

    def test_globals_not_visible_in_body(self):
        tcl = Tcl()
        tcl.run("set x 1; proc f {} { return $x }")
        result = tcl.eval("f")
        assert result.signal is Signal.ERROR
        assert result.kind is ErrorKind.UNDEFINED_VARIABLE

    def test_parameter_shadows_global(self):
        tcl = Tcl()
        tcl.run("set x outer; proc f {x} { set x changed; return $x }")
        assert tcl.eval("f inner").value == "changed"
        assert tcl.env["x"] == "outer"

    def test_argument_count_mismatch(self):
        tcl = Tcl()
        tcl.run("proc square {x} { * $x $x }")
        result = tcl.eval("square 1 2")
        assert result.signal is Signal.ERROR
        assert result.kind is ErrorKind.ARGUMENT_COUNT_MISMATCH
        assert result.value == 'wrong # args: should be "square x"'

    def test_frame_popped_after_error(self):
        tcl = Tcl()
        tcl.run("proc bad {} { set y 1; nosuch }")
        result = tcl.eval("bad")
        assert result.kind is ErrorKind.UNKNOWN_COMMAND
        assert tcl.interpreter.env.depth == 0
        assert "y" not in tcl.env

    def test_frame_popped_after_return(self):
        tcl = Tcl()
        tcl.run(FACT)
        tcl.eval("fact 4")
        assert tcl.interpreter.env.depth == 0

    def test_redefinition_replaces(self):
        tcl = Tcl()
        tcl.run("proc f {} { return 1 }; proc f {} { return 2 }")
        assert tcl.eval("f").value == "2"

    def test_proc_can_shadow_builtin(self):
        tcl = Tcl()
        tcl.run("proc puts {s} { return shadowed }")
        result = tcl.run("puts x")
        assert result.stdout == ""
        assert result.result == "shadowed"

    def test_mutual_recursion(self):
        tcl = Tcl()
        tcl.run(
            "proc even {n} { if {== $n 0} { return 1 }; return [odd [- $n 1]] }\n"
            "proc odd {n} { if {== $n 0} { return 0 }; return [even [- $n 1]] }"
        )
        assert tcl.eval("even 10").value == "1"
        assert tcl.eval("odd 7").value == "1"


class TestSignals:
    """Test where control signals are consumed."""

    def test_break_consumed_by_loop_inside_proc(self):
        tcl = Tcl()
        tcl.run(
            "proc f {} {\n"
            "    set i 0\n"
            "    while {< $i 10} {\n"
            "        if {== $i 3} { break }\n"
            "        set i [+ $i 1]\n"
            "    }\n"
            '    return "after $i"\n'
            "}"
        )
        assert tcl.eval("f") == Result("after 3", Signal.NORMAL)

    def test_return_from_inside_loop(self):
        tcl = Tcl()
        tcl.run(
            "proc first {} {\n"
            "    set i 0\n"
            "    while {== 0 0} { if {== $i 2} { return $i }; set i [+ $i 1] }\n"
            "    return never\n"
            "}"
        )
        assert tcl.eval("first").value == "2"

    def test_top_level_signals_are_returned_raw(self):
        tcl = Tcl()
        assert tcl.eval("break").signal is Signal.BREAK
        assert tcl.eval("continue").signal is Signal.CONTINUE
        assert tcl.eval("return 5") == Result("5", Signal.RETURN)

    def test_signal_stops_remaining_commands(self):
        tcl = Tcl()
        result = tcl.run("puts a; return; puts b")
        assert result.stdout == "a\n"

    def test_signal_in_command_substitution_aborts_command(self):
        tcl = Tcl()
        result = tcl.run(
            "set i 0\n"
            "while {< $i 3} { set i [+ $i 1]; puts [break] }\n"
            "puts $i"
        )
        assert result.stdout == "1\n"

    def test_break_cannot_escape_procedure(self):
        tcl = Tcl()
        tcl.run("proc p {} { break }")
        result = tcl.eval("while {== 0 0} { p }")
        assert result.signal is Signal.ERROR
        assert result.kind is ErrorKind.CONTROL_OUTSIDE_CONTEXT
        assert result.value == 'invoked "break" outside of a loop'

    def test_top_level_break_is_reported(self):
        tcl = Tcl()
        result = tcl.run("break")
        assert result.exit_code == 1
        assert result.stderr == 'error: invoked "break" outside of a loop\n'

    def test_top_level_return_is_reported(self):
        tcl = Tcl()
        result = tcl.run("return 1")
        assert result.exit_code == 1
        assert result.stderr == 'error: invoked "return" outside of a procedure\n'


class TestErrors:
    """Test error results."""

    def test_undefined_variable(self):
        tcl = Tcl()
        result = tcl.eval("puts $undefined")
        assert result.signal is Signal.ERROR
        assert result.kind is ErrorKind.UNDEFINED_VARIABLE
        assert result.value == 'can\'t read "undefined": no such variable'

    def test_undefined_variable_run(self):
        tcl = Tcl()
        result = tcl.run("puts before; puts $undefined; puts after")
        assert result.exit_code == 1
        assert result.stdout == "before\n"
        assert result.stderr == 'error: can\'t read "undefined": no such variable\n'

    def test_unknown_command(self):
        tcl = Tcl()
        result = tcl.eval("frobnicate 1 2")
        assert result.kind is ErrorKind.UNKNOWN_COMMAND
        assert result.value == 'invalid command name "frobnicate"'

    def test_syntax_error(self):
        tcl = Tcl()
        result = tcl.eval("puts {abc")
        assert result.kind is ErrorKind.SYNTAX
        assert result.value == "missing close-brace"

    def test_syntax_error_after_earlier_commands(self):
        tcl = Tcl()
        result = tcl.run("puts a\nputs [b")
        assert result.stdout == "a\n"
        assert result.exit_code == 1
        assert "missing close-bracket" in result.stderr

    def test_syntax_error_in_body_surfaces_when_evaluated(self):
        tcl = Tcl()
        assert tcl.eval('proc f {} { puts "x }').is_normal
        assert tcl.eval("f").kind is ErrorKind.SYNTAX

    def test_error_in_substitution_aborts_command(self):
        tcl = Tcl()
        result = tcl.eval("set x [+ 1 abc]")
        assert result.kind is ErrorKind.INVALID_NUMBER
        assert "x" not in tcl.env

    def test_error_propagates_through_nesting(self):
        tcl = Tcl()
        tcl.run("proc f {} { while {== 0 0} { if {== 1 1} { / 1 0 } } }")
        result = tcl.eval("puts [f]")
        assert result.kind is ErrorKind.DIVISION_BY_ZERO
        assert tcl.interpreter.env.depth == 0


class TestEngineInstances:
    """Test independence of engine instances and host commands."""

    def test_instances_are_independent(self):
        a = Tcl()
        b = Tcl()
        a.run("set x 1; proc f {} { return a }")
        assert "x" not in b.env
        assert b.eval("f").kind is ErrorKind.UNKNOWN_COMMAND

    def test_host_command(self):
        double = Builtin("double", lambda ctx, args: Result.ok(args[0] * 2))
        tcl = Tcl(commands={"double": double})
        assert tcl.run("puts [double ab]").stdout == "abab\n"

    def test_register_after_construction(self):
        tcl = Tcl()
        tcl.register("answer", Builtin("answer", lambda ctx, args: Result.ok("42")))
        assert tcl.eval("answer").value == "42"

    def test_commands_lists_builtins(self):
        tcl = Tcl()
        for name in ("+", "set", "puts", "if", "while", "proc", "return", "break", "continue"):
            assert name in tcl.commands

    def test_reset(self):
        tcl = Tcl(env={"keep": "1"})
        tcl.run("set x 1; proc f {} { return 1 }")
        tcl.reset()
        assert tcl.env == {"keep": "1"}
        assert tcl.eval("f").kind is ErrorKind.UNKNOWN_COMMAND


@pytest.mark.parametrize(
    "script,expected",
    [
        ("set s 0; set x 0; while {<= $x 5} { set s [+ $s $x]; set x [+ $x 1] }; puts $s", "15\n"),
        (FACT + "puts [fact 10]", "3628800\n"),
        ("proc fib {n} { if {< $n 2} { return $n }; + [fib [- $n 1]] [fib [- $n 2]] }; puts [fib 15]", "610\n"),
        (
            "set i 0; set s 0\n"
            "while {< $i 5} { set i [+ $i 1]; if {== $i 3} { continue }; set s [+ $s $i] }\n"
            "puts $s",
            "12\n",
        ),
    ],
)
def test_programs(script, expected):
    tcl = Tcl()
    result = tcl.run(script)
    assert result.exit_code == 0
    assert result.stdout == expected
