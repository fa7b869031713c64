"""Garden planning package.

Exports the main classes and functions so consumers can do::

    from garden import VarietyCatalogue, PlanRequest, filter_candidates, plan_garden
"""

from .errors import PlanningError, LayoutError, RequestError
from .spacing import CELL_SIZE_CM, cell_span, plants_per_cell, meters_to_cells
from .varieties import Variety, VarietyCatalogue
from .companion import companion_score, is_compatible, companion_details
from .request import PlanRequest, Preference
from .ranking import filter_candidates
from .grid import GardenGrid, Placement
from .allocation import plan_allocations
from .planner import GardenPlanner, plan_garden
from .response import build_response
from .persistence import (
    save_layout_csv,
    load_layout_csv,
    save_plan_json,
    load_plan_json,
)
