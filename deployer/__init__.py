"""
Bachi Deployment Package
Deployment runner, request/result models and deployment plans
"""

from .deployment_runner import DeploymentRunner
from .models import DeploymentRequest, DeploymentResult
from .plans import PLANS, DeploymentPlan

__all__ = ['DeploymentRunner', 'DeploymentRequest', 'DeploymentResult', 'PLANS', 'DeploymentPlan']
