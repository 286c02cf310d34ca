from chartmesh.api import chart
from chartmesh.backend import DrawingBackend, RasterBackend
from chartmesh.context import ChartContext
from chartmesh.coord import MeshLine, RangedCoord
from chartmesh.errors import BackendError, DrawError, TargetConsumedError
from chartmesh.mesh import FINE_MESH_MULTIPLIER, MeshStyle, ResolvedMeshStyles, resolve_mesh_styles
from chartmesh.ranged import Ranged, RangedCategory, RangedDate, RangedFloat, RangedInt
from chartmesh.style import FontDesc, ShapeStyle, TextStyle, mix

__all__ = [
    "BackendError",
    "ChartContext",
    "DrawError",
    "DrawingBackend",
    "FINE_MESH_MULTIPLIER",
    "FontDesc",
    "MeshLine",
    "MeshStyle",
    "Ranged",
    "RangedCategory",
    "RangedCoord",
    "RangedDate",
    "RangedFloat",
    "RangedInt",
    "RasterBackend",
    "ResolvedMeshStyles",
    "ShapeStyle",
    "TargetConsumedError",
    "TextStyle",
    "chart",
    "mix",
    "resolve_mesh_styles",
]
