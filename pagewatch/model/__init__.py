STATE_NO_CHANGE = 'no_change'
STATE_CHANGED = 'changed'
STATE_ERROR = 'error'

TARGET_STATES = (STATE_NO_CHANGE, STATE_CHANGED, STATE_ERROR)

DEFAULT_CHANGE_THRESHOLD = 100
