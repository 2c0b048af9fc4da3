from django import forms

from .models import Organisation, OrganisationUpdate


class OrganisationForm(forms.ModelForm):
    """Fields a signed-in user may set on an organisation."""

    class Meta:
        model = Organisation
        fields = [
            "name",
            "description",
            "address",
            "postcode",
            "email",
            "website",
            "telephone",
            "donation_info",
            "publish_address",
            "publish_phone",
            "publish_email",
            "categories",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 6}),
            "categories": forms.CheckboxSelectMultiple,
        }


class OrganisationEditForm(OrganisationForm):
    admin_email_to_add = forms.EmailField(
        required=False,
        label="Add an administrator (e-mail)",
        help_text="The user must already have signed up.",
    )

    def to_update(self) -> OrganisationUpdate:
        attributes = {
            name: self.cleaned_data[name]
            for name in self._meta.fields
            if name in self.cleaned_data
        }
        return OrganisationUpdate(
            attributes=attributes,
            admin_email_to_add=self.cleaned_data.get("admin_email_to_add") or None,
        )
