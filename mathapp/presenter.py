"""
presenter.py — ComputationResult → what the page shows.

The payload always has ``ok`` and ``message`` (the text for the output box);
text results add ``latex``/``raw`` for the copy boxes, graphs add a Plotly
``figure`` and ``config``.
"""

import json
import logging

import plotly.graph_objects as go

from .errors import PresentationUnavailable
from .results import Failure, SampleResult, TextResult

logger = logging.getLogger(__name__)

GRAPH_HEIGHT = 400

PLOT_CONFIG = {
    'responsive': True,
    'staticPlot': False,
    'displayModeBar': True,
    'scrollZoom': False,
    'modeBarButtonsToRemove': ['zoom2d', 'zoomIn2d', 'zoomOut2d', 'pan2d'],
}


class Presenter:
    def __init__(self, graph_surface=True):
        self.graph_surface = graph_surface

    def present(self, result):
        if isinstance(result, TextResult):
            return {
                'ok': True,
                'type': 'text',
                'message': None,
                'latex': result.markup,
                'raw': result.raw,
            }
        if isinstance(result, SampleResult):
            return self._present_graph(result)
        if isinstance(result, Failure):
            return {'ok': False, 'type': 'failure', 'kind': result.kind, 'error': result.message,
                    'message': result.message}
        raise TypeError(f'Not a computation result: {result!r}')

    def _present_graph(self, result):
        if not result.has_real_values:
            return {'ok': True, 'type': 'graph', 'figure': None,
                    'message': 'Function evaluates to non-real values on this range.'}
        try:
            figure = self.build_figure(result)
        except PresentationUnavailable as exc:
            logger.warning('Graph not shown: %s', exc.message)
            return {'ok': True, 'type': 'graph', 'figure': None, 'message': exc.message}
        return {'ok': True, 'type': 'graph', 'figure': figure, 'config': PLOT_CONFIG,
                'height': GRAPH_HEIGHT, 'message': 'Graph generated below.'}

    def build_figure(self, result):
        """Plotly figure as a JSON-ready dict; gaps stay gaps."""
        if not self.graph_surface:
            raise PresentationUnavailable('Plot container missing in page.')
        fig = go.Figure(
            data=[go.Scatter(
                x=list(result.xs),
                y=list(result.ys),
                mode='lines',
                name=result.expression,
                connectgaps=False,
            )],
            layout=go.Layout(
                title=f'Graph of {result.expression}',
                xaxis={'title': 'x'},
                yaxis={'title': 'y'},
                margin={'t': 40, 'b': 40},
            ),
        )
        return json.loads(fig.to_json())
