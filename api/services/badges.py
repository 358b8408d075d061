# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Status badge formatting.

Owns the single closed mapping from badge variant to colour pair and from
display label to badge text, so status vocabulary lives in one place.
"""

from typing import Dict

from models.enums import BadgeVariant, DisplayLabel
from models.responses import BadgeStyle, StatusBadge


# Palette colours
SUCCESS_LIGHT = '#7FFFD4'
SUCCESS_DARK = '#05B589'
WARNING_LIGHT = '#FFD60A'
WARNING_DARK = '#FB8500'
ERROR_LIGHT = '#F77F00'
ERROR_DARK = '#9D0208'
INFO_LIGHT = '#4CC9F0'
INFO_DARK = '#4361EE'

BADGE_STYLES: Dict[BadgeVariant, BadgeStyle] = {
    BadgeVariant.ELIGIBLE: BadgeStyle(background=SUCCESS_LIGHT, text=SUCCESS_DARK),
    BadgeVariant.PENDING: BadgeStyle(background=WARNING_LIGHT, text=WARNING_DARK),
    BadgeVariant.INELIGIBLE: BadgeStyle(background=ERROR_LIGHT, text=ERROR_DARK),
    BadgeVariant.TEMPORARY_INELIGIBLE: BadgeStyle(background=WARNING_LIGHT, text=WARNING_DARK),
    BadgeVariant.RE_VERIFICATION_REQUIRED: BadgeStyle(background=INFO_LIGHT, text=INFO_DARK),
}

LABEL_VARIANTS: Dict[DisplayLabel, BadgeVariant] = {
    DisplayLabel.ELIGIBLE: BadgeVariant.ELIGIBLE,
    DisplayLabel.PENDING: BadgeVariant.PENDING,
    DisplayLabel.INELIGIBLE: BadgeVariant.INELIGIBLE,
    DisplayLabel.TEMPORARY_INELIGIBLE: BadgeVariant.TEMPORARY_INELIGIBLE,
    DisplayLabel.RE_VERIFICATION_REQUIRED: BadgeVariant.RE_VERIFICATION_REQUIRED,
    DisplayLabel.CONSENT_REQUIRED: BadgeVariant.PENDING,
    DisplayLabel.CONSENT_RENEWAL_REQUIRED: BadgeVariant.PENDING,
}

LABEL_TEXT: Dict[DisplayLabel, str] = {
    DisplayLabel.ELIGIBLE: "Eligible",
    DisplayLabel.PENDING: "Pending Review",
    DisplayLabel.INELIGIBLE: "Ineligible",
    DisplayLabel.TEMPORARY_INELIGIBLE: "Temporarily Ineligible",
    DisplayLabel.RE_VERIFICATION_REQUIRED: "Re-verification Required",
    DisplayLabel.CONSENT_REQUIRED: "Consent Required",
    DisplayLabel.CONSENT_RENEWAL_REQUIRED: "Consent Renewal Required",
}


class BadgeFormatter:
    """Formatter turning display labels into badge rendering data."""
    
    def __init__(
        self,
        styles: Dict[BadgeVariant, BadgeStyle] = None,
        label_text: Dict[DisplayLabel, str] = None
    ):
        self.styles = dict(styles or BADGE_STYLES)
        self.label_text = dict(label_text or LABEL_TEXT)
        
        missing = [v.value for v in BadgeVariant if v not in self.styles]
        if missing:
            raise ValueError(f"Badge styles missing for variants: {', '.join(missing)}")
    
    def variant_for(self, label: DisplayLabel) -> BadgeVariant:
        """Badge variant used to render a display label."""
        return LABEL_VARIANTS[DisplayLabel(label)]
    
    def style_for(self, variant: BadgeVariant) -> BadgeStyle:
        """Colour pair for a badge variant."""
        return self.styles[BadgeVariant(variant)]
    
    def format(self, label: DisplayLabel) -> StatusBadge:
        """Build the badge for a display label."""
        label = DisplayLabel(label)
        variant = self.variant_for(label)
        
        return StatusBadge(
            label=label,
            variant=variant,
            text=self.label_text.get(label, label.value),
            style=self.style_for(variant)
        )


def create_badge_formatter() -> BadgeFormatter:
    """Create a badge formatter with the program palette."""
    return BadgeFormatter()
