from .solvers import (AbstractPuzzleSolver, InternalSolver, ConstraintSolver,
                      count_solutions, get_solver_instances)
