# -*- coding: utf-8 -*-
"""Customer onboarding wizard."""

from .onboarding_context import OnboardingContext, OnboardingStep
from .onboarding_wizard import OnboardingWizard

__all__ = [
    'OnboardingContext',
    'OnboardingStep',
    'OnboardingWizard',
]
