import io

import pandas as pd
import streamlit as st

from analysis import comparison_table
from equations import get_problem
from simulation.errors import ODESolverError
from simulation.integrators import create_method
from simulation.results import build_rows, csv_header

from ui.parameters_ui import get_parameters
from ui.method_ui import get_equation_key, get_method_keys
from plots.trajectory_plot import plot_trajectories
from plots.error_plot import plot_errors

st.set_page_config(page_title="ODE Step Solver", layout="wide")
st.title("Numerical Differential Equation Solver")
st.markdown("""
Solve **dy/dx = f(x, y)** with fixed-step methods and compare them.

- 👉 Choose the equation, initial conditions and methods in the sidebar.
- 📈 Trajectories, errors and the comparison table appear below.
""")

with st.sidebar:
    equation_key = get_equation_key()
    params = get_parameters()
    method_keys = get_method_keys()
    problem = get_problem(equation_key)
    compare_exact = st.checkbox("Compare with exact solution", value=problem.has_exact,
                                disabled=not problem.has_exact)

if st.button("Solve"):
    methods = []
    try:
        for key in method_keys:
            method = create_method(key, problem.f, problem.exact, verbose=False)
            method.set_parameters(**params)
            method.set_compare_exact(compare_exact)
            method.solve()
            methods.append(method)
    except ODESolverError as exc:
        st.error(str(exc))
        st.stop()

    if not methods:
        st.warning("Please select at least one method.")
        st.stop()

    st.plotly_chart(plot_trajectories(methods, problem.exact if compare_exact else None),
                    use_container_width=True)

    if compare_exact:
        st.subheader("Comparison")
        st.dataframe(comparison_table(methods))
        st.plotly_chart(plot_errors(methods), use_container_width=True)

    st.subheader("Trajectories")
    for method in methods:
        with st.expander(method.get_method_name()):
            df = pd.DataFrame(build_rows(method), columns=csv_header(method.compare_exact))
            st.dataframe(df)
            buffer = io.StringIO()
            df.to_csv(buffer, index=False)
            st.download_button(
                "Download CSV", buffer.getvalue(),
                file_name=f"{method.key}_results.csv", mime="text/csv", key=method.key,
            )
