# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pydantic models for the Kog operator.

Desired state:
    ModelControlPlaneSpec, ModelDatabase, ModelIofogUser

Component bundles:
    ModelMicroservice, ModelContainer, ModelEnvVar, ModelProbe,
    ModelHttpGetAction, ModelResourceRequirements, ModelResourceQuantities,
    ModelServicePort, ModelSecret, ModelSecretVolume, ModelVolumeMount,
    ModelPolicyRule

Reconciliation:
    ModelOwnerReference, ModelDerivedValues, ModelObjectAction,
    ModelReconcileResult, ModelOperatorConfig
"""

from kog_operator.models.model_container import ModelContainer
from kog_operator.models.model_control_plane_spec import ModelControlPlaneSpec
from kog_operator.models.model_database import ModelDatabase
from kog_operator.models.model_derived_values import ModelDerivedValues
from kog_operator.models.model_env_var import ModelEnvVar
from kog_operator.models.model_iofog_user import ModelIofogUser
from kog_operator.models.model_microservice import ModelMicroservice
from kog_operator.models.model_object_action import ModelObjectAction
from kog_operator.models.model_operator_config import ModelOperatorConfig
from kog_operator.models.model_owner_reference import ModelOwnerReference
from kog_operator.models.model_policy_rule import ModelPolicyRule
from kog_operator.models.model_probe import ModelHttpGetAction, ModelProbe
from kog_operator.models.model_reconcile_result import ModelReconcileResult
from kog_operator.models.model_resource_requirements import (
    ModelResourceQuantities,
    ModelResourceRequirements,
)
from kog_operator.models.model_secret import ModelSecret
from kog_operator.models.model_service_port import ModelServicePort
from kog_operator.models.model_volume import ModelSecretVolume, ModelVolumeMount

__all__ = [
    "ModelContainer",
    "ModelControlPlaneSpec",
    "ModelDatabase",
    "ModelDerivedValues",
    "ModelEnvVar",
    "ModelHttpGetAction",
    "ModelIofogUser",
    "ModelMicroservice",
    "ModelObjectAction",
    "ModelOperatorConfig",
    "ModelOwnerReference",
    "ModelPolicyRule",
    "ModelProbe",
    "ModelReconcileResult",
    "ModelResourceQuantities",
    "ModelResourceRequirements",
    "ModelSecret",
    "ModelSecretVolume",
    "ModelServicePort",
    "ModelVolumeMount",
]
