# SPDX-FileCopyrightText: Copyright diagramalgebra contributors
# SPDX-License-Identifier: Apache-2.0
"""Commands of the ``diagramalgebra`` CLI, one per module."""
