import numpy as np

from cnfpy.transformations.get_variables import get_variables


def truth_table(names):
    """
    All assignments of the given variable names, as a dict from name to a Boolean numpy array
    (one entry per assignment, 2**len(names) in total)
    """
    n = len(names)
    rows = np.arange(2 ** n, dtype=np.int64)
    return {name: ((rows >> i) & 1).astype(bool) for i, name in enumerate(names)}


def count_models(expr):
    """ number of assignments of the variables of `expr` that make it true """
    names = [v.name for v in get_variables(expr)]
    return int(np.sum(expr.value(truth_table(names))))


def count_cnf_models(cnf):
    """ number of assignments of all `cnf.nr_vars` variables that satisfy the clauses """
    return int(np.sum(cnf.value(cnf.all_assignments())))


def ortools_count(cnf):
    """ number of solutions of the clauses, counted independently with OR-Tools CP-SAT """
    from ortools.sat.python import cp_model

    model = cp_model.CpModel()
    bvs = [model.new_bool_var(f"x{i+1}") for i in range(cnf.nr_vars)]
    for clause in cnf.clauses:
        model.add_bool_or([bvs[lit-1] if lit > 0 else bvs[-lit-1].Not() for lit in clause])

    class Counter(cp_model.CpSolverSolutionCallback):
        def __init__(self):
            super().__init__()
            self.count = 0

        def on_solution_callback(self):
            self.count += 1

    solver = cp_model.CpSolver()
    solver.parameters.enumerate_all_solutions = True
    counter = Counter()
    solver.solve(model, counter)
    return counter.count
