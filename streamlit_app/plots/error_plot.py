# error_plot.py

import numpy as np
import plotly.graph_objects as go


def plot_errors(methods):
    """Absolute error |exact - y| at every point, one trace per method."""
    fig = go.Figure()
    for method in methods:
        errors = np.abs(method.exact_values() - method.y_values)
        fig.add_trace(go.Scatter(x=method.x_values, y=errors, name=method.get_method_name()))

    fig.update_layout(
        title="Absolute Error Along the Trajectory",
        xaxis_title="x",
        yaxis_title="|exact - y|",
        yaxis_type="log",
        legend=dict(x=0, y=1.1, orientation="h"),
        template="plotly_white"
    )
    return fig
