# trajectory_plot.py

import numpy as np
import plotly.graph_objects as go


def plot_trajectories(methods, exact_func=None, n_exact: int = 200):
    """Plot the y trajectory of every solved method, with the exact curve if known."""
    fig = go.Figure()

    for method in methods:
        fig.add_trace(go.Scatter(
            x=method.x_values, y=method.y_values,
            mode="lines+markers", name=method.get_method_name(),
        ))

    if exact_func is not None and methods:
        x = methods[0].x_values
        x_fine = np.linspace(x[0], x[-1], n_exact)
        y_fine = [exact_func(v) for v in x_fine]
        fig.add_trace(go.Scatter(
            x=x_fine, y=y_fine, name="Exact solution", line=dict(color="black", dash="dash")
        ))

    fig.update_layout(
        title="Approximate Solutions",
        xaxis_title="x",
        yaxis_title="y",
        legend=dict(x=0, y=1.1, orientation="h"),
        template="plotly_white"
    )
    return fig
