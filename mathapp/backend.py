# backend.py
import json
import logging
import threading

from PyQt5.QtCore import QObject, pyqtSignal, pyqtSlot

logger = logging.getLogger(__name__)


class Backend(QObject):
    """Exposed to the page over QWebChannel in the desktop shell."""
    resultReady = pyqtSignal(str)
    busyChanged = pyqtSignal(bool)

    def __init__(self, dispatcher, presenter, parent=None):
        super().__init__(parent)
        self.dispatcher = dispatcher
        self.presenter = presenter

    @pyqtSlot(str, str)
    def computeResult(self, expression, command):
        # Keep the UI thread free; signals are delivered back on the GUI thread
        worker = threading.Thread(target=self.run, args=(expression, command), daemon=True)
        worker.start()

    def run(self, expression, command):
        self.busyChanged.emit(True)
        try:
            result = self.dispatcher.compute(expression, command)
            payload = self.presenter.present(result)
        except Exception as e:
            logger.exception('Desktop computation failed')
            payload = {'ok': False, 'type': 'failure', 'kind': 'error', 'error': f'Error: {e}', 'message': f'Error: {e}'}
        self.resultReady.emit(json.dumps(payload))
        self.busyChanged.emit(False)
        return payload
