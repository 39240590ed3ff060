"""Forms for the content type generator settings page."""

from __future__ import annotations

from django import forms
from django.utils.translation import gettext_lazy as _

from registry.codec import FIELD_PLURAL, FIELD_SINGULAR, FIELD_TYPE_KEY
from registry.dto import CandidateDefinition


class ContentTypeDefinitionForm(forms.Form):
    """Collect one raw content type definition.

    Fields are deliberately permissive: normalization, identifier validation,
    and duplicate detection are owned by the definition store so that every
    write path applies the same rules.
    """

    cptg_post_type = forms.CharField(
        required=False,
        label=_("Post Type"),
        help_text=_("Lowercase letters, numbers, underscores and hyphens (e.g. 'movie')."),
    )
    cptg_singular_name = forms.CharField(
        required=False,
        label=_("Singular Name"),
    )
    cptg_plural_name = forms.CharField(
        required=False,
        label=_("Plural Name"),
    )

    def to_candidate(self) -> CandidateDefinition:
        """Return the cleaned submission as a CandidateDefinition.

        Returns:
            The raw candidate ready for `DefinitionStore.append`.
        """

        data = self.cleaned_data
        return CandidateDefinition(
            type_key=data.get(FIELD_TYPE_KEY) or "",
            singular_label=data.get(FIELD_SINGULAR) or "",
            plural_label=data.get(FIELD_PLURAL) or "",
        )
