# backend/localgov_menu_link_group/forms.py
from django import forms
from django.contrib.admin.widgets import FilteredSelectMultiple
from django.core.exceptions import ValidationError
from django.core.validators import RegexValidator

from navigation.forms import MenuLinkChoiceField, MenuLinkMultipleChoiceField

from .grouper import fix_menu_for_all_child_links
from .models import MenuLinkGroup


class MenuLinkGroupForm(forms.ModelForm):
    """
    Add/edit form for menu link groups.

    New ids are prefixed with ENTITY_ID_PREFIX. Child menu links are always
    moved into the menu of the selected parent menu link.
    """

    ENTITY_ID_PREFIX = "localgov_menu_link_group_"

    label = forms.CharField(
        label="Group name",
        max_length=255,
        help_text="It will act as label of the menu link for this group.",
    )
    id = forms.CharField(
        label="Machine name",
        max_length=255 - len(ENTITY_ID_PREFIX),
        validators=[
            RegexValidator(
                regex=r"^[a-z0-9_]+$",
                message="Machine names can only contain lowercase letters, numbers and underscores.",
            )
        ],
    )
    weight = forms.IntegerField(label="Weight of its menu link", initial=0)
    parent_menu_link = MenuLinkChoiceField(
        label="Parent menu link",
        help_text="The menu link for this group will appear as a child of this menu link. Example: Add content.",
    )
    child_menu_links = MenuLinkMultipleChoiceField(
        label="Child menu links",
        required=False,
        help_text="These will appear as children of the menu link for this group. Example: Article, Basic page.",
        widget=FilteredSelectMultiple("child menu links", is_stacked=False, attrs={"size": 20}),
    )

    class Meta:
        model = MenuLinkGroup
        fields = ["label", "id", "status", "weight", "parent_menu_link", "child_menu_links"]
        labels = {"status": "Enabled"}

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.fields["parent_menu_link"].load_choices()
        self.fields["child_menu_links"].load_choices()

        if self.is_new:
            self.fields["id"].help_text = f"Saved as '{self.ENTITY_ID_PREFIX}<machine name>'."
        else:
            self.fields["id"].disabled = True
            self.initial["child_menu_links"] = fix_menu_for_all_child_links(
                self.instance.child_menu_links,
                self.instance.parent_menu_link,
            )

    @property
    def is_new(self) -> bool:
        return self.instance._state.adding

    def clean_id(self):
        group_id = self.cleaned_data["id"]
        if not self.is_new:
            return group_id

        group_id_w_prefix = self.ENTITY_ID_PREFIX + group_id
        if MenuLinkGroup.exists(group_id_w_prefix):
            raise ValidationError(
                "The machine-readable name is already in use. It must be unique.",
                code="exists",
            )
        return group_id_w_prefix

    def clean(self):
        cleaned_data = super().clean()

        cleaned_data["child_menu_links"] = fix_menu_for_all_child_links(
            cleaned_data.get("child_menu_links") or [],
            cleaned_data.get("parent_menu_link") or "",
        )
        return cleaned_data
