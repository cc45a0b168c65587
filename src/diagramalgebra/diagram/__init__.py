# SPDX-FileCopyrightText: Copyright diagramalgebra contributors
# SPDX-License-Identifier: Apache-2.0
"""The diagram algebra.

This module contains the diagram tree with its constructors and
combinators, the geometry it is laid out with, and size inference.
"""
# isort: off
from ._vector2d import *

from ._colors import *
from ._geometry import *
from ._diagram import *
from ._layout import *

import typing as t

if not t.TYPE_CHECKING:
    from ._vector2d import __all__ as _all1
    from ._colors import __all__ as _all2
    from ._geometry import __all__ as _all3
    from ._diagram import __all__ as _all4
    from ._layout import __all__ as _all5

    __all__ = [*_all1, *_all2, *_all3, *_all4, *_all5]

    del _all1, _all2, _all3, _all4, _all5
del t
