"""
Plotly rendering of geoid undulation grids
"""

__all__ = ['draw_undulation_grid']

from typing import Optional

import numpy as np
import plotly.graph_objects as go

from egm96.geoid import GeoidModel
from egm96.grid import undulation_grid


def draw_undulation_grid(
    model: GeoidModel,
    lat_step: float = 5.0,
    lon_step: float = 5.0,
    colorscale: Optional[str] = None,
    **kwargs
) -> go.Figure:
    """
    Plots the undulation of a geoid model as a heatmap over latitude and longitude.

    Args:
        model:
            The geoid model

        lat_step: (Default 5.0)
            The grid spacing in latitude, in degrees

        lon_step: (Default 5.0)
            The grid spacing in longitude, in degrees

        colorscale: (Default 'RdBu_r')
            A plotly colorscale name

    Keyword Args:
        Passed through to go.Figure.update_layout()

    Returns:
        go.Figure
    """
    latitudes, longitudes, undulations = undulation_grid(model, lat_step, lon_step)

    # Present longitudes in [-180, 180)
    shifted = (longitudes + 180) % 360 - 180
    order = np.argsort(shifted[:-1], kind='stable')

    fig = go.Figure(
        go.Heatmap(
            x=shifted[:-1][order],
            y=latitudes,
            z=undulations[:, :-1][:, order],
            colorscale=colorscale or 'RdBu_r',
            colorbar={'title': 'N (m)'},
            hovertemplate='lat: %{y}<br>lon: %{x}<br>N: %{z:.2f} m<extra></extra>',
        )
    )
    fig.update_layout(
        xaxis_title='Longitude (degrees)',
        yaxis_title='Latitude (degrees)',
        title='EGM96 geoid undulation',
        **kwargs
    )
    return fig
