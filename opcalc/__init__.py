"""opcalc — a single-operation calculator.

Reads an operator and two operands from stdin and prints the result, or
Error! for division by zero, an unknown operator or malformed input.

Usage:
    echo "+ 3 4" | python -m opcalc      # 7
    echo "* 2.5 4" | python -m opcalc    # 10
    echo "/ 5 0" | python -m opcalc      # Error!
"""
