# main.py
# Desktop shell: serves the Flask page on a local thread and shows it in a
# QWebEngineView, with the Backend object exposed over QWebChannel.
import logging
import sys
import threading

from PyQt5.QtCore import QUrl
from PyQt5.QtWebChannel import QWebChannel
from PyQt5.QtWebEngineWidgets import QWebEngineView
from PyQt5.QtWidgets import QApplication, QMainWindow
from werkzeug.serving import make_server

from .app import create_app
from .backend import Backend

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, flask_app):
        super().__init__()
        self.setWindowTitle("Math App")
        self.resize(900, 700)

        services = flask_app.extensions['mathapp']

        # Serve the page from a background thread
        self.server = make_server(flask_app.config['HOST'], 0, flask_app, threaded=True)
        self.server_thread = threading.Thread(target=self.server.serve_forever, daemon=True)
        self.server_thread.start()
        url = f"http://{flask_app.config['HOST']}:{self.server.server_port}/"
        logger.info('Desktop shell serving %s', url)

        self.web_view = QWebEngineView()
        self.setCentralWidget(self.web_view)

        # Set up the backend and web channel for communication
        self.backend = Backend(services['dispatcher'], services['presenter'])
        self.channel = QWebChannel()
        self.channel.registerObject('backend', self.backend)
        self.web_view.page().setWebChannel(self.channel)

        self.web_view.load(QUrl(url))

    def closeEvent(self, event):
        self.server.shutdown()
        event.accept()


def run():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    app = QApplication(sys.argv)
    window = MainWindow(create_app())
    window.show()
    return app.exec_()


if __name__ == '__main__':
    sys.exit(run())
