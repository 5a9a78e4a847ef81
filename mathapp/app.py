"""
app.py — Flask front end for the calculator.

Run:  python -m mathapp.app
Then open http://127.0.0.1:8000
"""
import logging

from flask import Flask, jsonify, render_template, request

from . import config as default_config
from .dispatcher import Dispatcher
from .engine import AlgebraEngine
from .presenter import Presenter

# HTTP status for each failure kind; anything unlisted is a 400
_STATUS = {
    'engine-unavailable': 503,
    'engine-busy': 409,
    'engine-error': 422,
}


def create_app(engine=None, overrides=None):
    app = Flask(__name__)
    app.config.from_object(default_config)
    app.config.from_prefixed_env('MATHAPP')
    if overrides:
        app.config.update(overrides)

    if engine is None:
        engine = AlgebraEngine(load_timeout=app.config['ENGINE_LOAD_TIMEOUT']).start()

    dispatcher = Dispatcher(
        engine,
        domain=(app.config['X_MIN'], app.config['X_MAX']),
        graph_points=app.config['GRAPH_POINTS'],
        preview_points=app.config['PREVIEW_POINTS'],
    )
    presenter = Presenter(graph_surface=app.config['GRAPH_SURFACE'])
    app.extensions['mathapp'] = {'engine': engine, 'dispatcher': dispatcher, 'presenter': presenter}

    @app.route('/')
    def index():
        return render_template('index.html')

    @app.route('/status')
    def status():
        return jsonify({'ready': engine.ready, 'busy': engine.busy, 'error': engine.unavailable_reason})

    @app.route('/compute', methods=['POST'])
    def compute():
        content = request.get_json(silent=True)
        if not isinstance(content, dict):
            return jsonify({'ok': False, 'kind': 'bad-request', 'error': 'Expected a JSON object'}), 400

        expression = content.get('expression', '')
        command = content.get('command', 'solve')
        preview = content.get('preview', False)
        if not isinstance(preview, bool):
            return jsonify({'ok': False, 'kind': 'bad-request', 'error': '"preview" must be true or false'}), 400

        result = dispatcher.compute(expression, command, preview=preview)
        payload = presenter.present(result)
        if payload['ok']:
            return jsonify(payload)

        app.logger.info('compute failed (%s): %s', payload['kind'], payload['error'])
        return jsonify(payload), _STATUS.get(payload['kind'], 400)

    return app


def main():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    app = create_app()
    app.run(host=app.config['HOST'], port=app.config['PORT'])


if __name__ == '__main__':
    main()
