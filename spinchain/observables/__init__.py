from .observable import ObservableBase, ProdObservable, SumObservable
from .pauli import SigmaX, SigmaY, SigmaZ
from .interactions import NeighbourInteraction
from .system import System
from .utils import to_01, to_pm1
