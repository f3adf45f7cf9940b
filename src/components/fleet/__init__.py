"""
Fleet component - Equipment and operator records.
"""

from .component import (
    EQUIPMENT_STATUSES,
    run,
    run_create_equipment,
    run_create_operator,
    run_delete_equipment,
    run_get_equipment,
    run_get_operator,
    run_list_equipment,
    run_list_operators,
    run_update_equipment,
    validate_equipment_data,
)
from .models import (
    CreateEquipmentInput,
    CreateOperatorInput,
    DeleteEquipmentInput,
    EquipmentListOutput,
    EquipmentOutput,
    FleetValidationError,
    GetEquipmentInput,
    GetOperatorInput,
    ListEquipmentInput,
    ListOperatorsInput,
    OperatorListOutput,
    OperatorOutput,
    UpdateEquipmentInput,
)
from .ports import EquipmentRepoPort, OperatorRepoPort

__all__ = [
    # Entry points
    "run",
    "run_create_equipment",
    "run_update_equipment",
    "run_get_equipment",
    "run_list_equipment",
    "run_delete_equipment",
    "run_create_operator",
    "run_get_operator",
    "run_list_operators",
    "validate_equipment_data",
    "EQUIPMENT_STATUSES",
    # Input models
    "CreateEquipmentInput",
    "UpdateEquipmentInput",
    "GetEquipmentInput",
    "ListEquipmentInput",
    "DeleteEquipmentInput",
    "CreateOperatorInput",
    "GetOperatorInput",
    "ListOperatorsInput",
    # Output models
    "EquipmentOutput",
    "EquipmentListOutput",
    "OperatorOutput",
    "OperatorListOutput",
    "FleetValidationError",
    # Ports
    "EquipmentRepoPort",
    "OperatorRepoPort",
]
