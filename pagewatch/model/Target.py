import time
import uuid as uuid_builder

from loguru import logger

from . import DEFAULT_CHANGE_THRESHOLD, STATE_CHANGED, STATE_ERROR, STATE_NO_CHANGE, TARGET_STATES


class model(dict):
    """A tracked page, kept as a plain dict so it serializes straight to JSON"""

    def __init__(self, *arg, **kw):
        super(model, self).__init__({
            'uuid': str(uuid_builder.uuid4()),
            'title': 'New Page',
            'url': '',
            'change_threshold': DEFAULT_CHANGE_THRESHOLD,
            'state': STATE_NO_CHANGE,
            'last_scan_time': None,
            'last_change_time': None,
            'error_message': None,
        })

        if kw.get('default'):
            self.update(kw['default'])
            del kw['default']

        self.update(*arg, **kw)

        if self['state'] not in TARGET_STATES:
            logger.warning(f"Target {self['uuid']} had unknown state '{self['state']}', resetting")
            self['state'] = STATE_NO_CHANGE

    @property
    def uuid(self):
        return self['uuid']

    def is_changed(self):
        return self['state'] == STATE_CHANGED

    def is_error(self):
        return self['state'] == STATE_ERROR

    def mark_as_read(self):
        self['state'] = STATE_NO_CHANGE

    def mark_changed(self, when=None):
        self['state'] = STATE_CHANGED
        self['last_change_time'] = when or time.time()

    def mark_error(self, message):
        self['state'] = STATE_ERROR
        self['error_message'] = message or 'Unknown error'
