from .callback import CallbackBase
from .callback_list import CallbackList
from .lambda_callback import LambdaCallback
from .logger import Logger
from .timer import Timer
