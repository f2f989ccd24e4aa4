from .solution_gen import synthesize_solution
from .carver import carve_puzzle, hidden_cell_target
