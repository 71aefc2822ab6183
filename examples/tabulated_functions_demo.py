"""Demonstration script for tabulated functions and solvers."""
import logging

import sympy as sp

from pytabfunc import (
    ArrayTabulatedFunction,
    LinkedListTabulatedFunction,
    MiddleSteppingDifferentialOperator,
    NewtonMethodFunction,
    SimpleIterationFunction,
    SymbolicFunction,
    TabulatedDifferentialOperator,
    TabulatedFunctionOperationService,
    TabulatedFunctionVisualizer
)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s -> %(message)s"
    )
    # Silence noisy libraries
    logging.getLogger('matplotlib').setLevel(logging.WARNING)
    logging.getLogger('PIL').setLevel(logging.WARNING)
    logging.getLogger('fontTools').setLevel(logging.WARNING)


def demonstrate_tables():
    print(f"\n{'=' * 80}")
    print("TABLES")
    print(f"{'=' * 80}")
    x = sp.Symbol('x')
    source = SymbolicFunction(sp.sin(x) + x / 2, x)
    array_table = ArrayTabulatedFunction.from_function(source, 0.0, 6.0, 13)
    list_table = LinkedListTabulatedFunction(array_table.x_values, array_table.y_values)
    print(array_table)
    for probe in [-1.0, 0.25, 3.0, 7.5]:
        print(f"  f({probe:5.2f}) = {array_table(probe): .6f} (exact {source(probe): .6f}, "
              f"linked list {list_table(probe): .6f})")

    list_table.insert(6.5, source(6.5))
    list_table.remove(0)
    print(f"Linked list after edits: {list_table.get_count()} points on "
          f"[{list_table.left_bound()}, {list_table.right_bound()}]")
    return array_table, source


def demonstrate_operations(table, source):
    print(f"\n{'=' * 80}")
    print("OPERATIONS")
    print(f"{'=' * 80}")
    service = TabulatedFunctionOperationService()
    doubled = service.add(table, table)
    print(f"(f + f)(1.0) = {doubled(1.0):.6f}")
    derivative = TabulatedDifferentialOperator().derive(table)
    exact = MiddleSteppingDifferentialOperator(1e-5).derive(source)
    print(f"Tabulated f'(1.0) = {derivative(1.0):.6f}, central difference {exact(1.0):.6f}")
    return derivative


def demonstrate_solvers():
    print(f"\n{'=' * 80}")
    print("SOLVERS")
    print(f"{'=' * 80}")
    newton = NewtonMethodFunction.from_expression("x**3 - 2*x - 5")
    result = newton.solve(2.0)
    print(f"Newton: x = {result.value:.10f} after {result.iterations} iterations "
          f"(converged: {result.converged})")
    babylonian = SimpleIterationFunction(lambda v: (v + 2 / v) / 2, 1.0)
    result = babylonian.solve()
    print(f"Simple iteration: sqrt(2) ~ {result.value:.10f} after {result.iterations} iterations")


def main():
    setup_logging()
    table, source = demonstrate_tables()
    derivative = demonstrate_operations(table, source)
    demonstrate_solvers()
    visualizer = TabulatedFunctionVisualizer()
    visualizer.plot(table, "sin_plus_half_x", extra=[("exact", source)])
    visualizer.plot(derivative, "derivative")
    print(f"\nPlots written to {visualizer.plot_directory.resolve()}")


if __name__ == "__main__":
    main()
