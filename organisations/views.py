"""
Views for the organisations app.

Server-rendered pages for browsing, searching and maintaining the
directory.  Anyone may list, search and view organisations; everything
that changes data goes through `policy.decide()` first.  Permission
failures never raise: they redirect, sometimes with a notice.
"""
import logging

from django.conf import settings
from django.contrib import messages
from django.contrib.auth.views import redirect_to_login
from django.core.paginator import Paginator
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from users import permissions

from .forms import OrganisationEditForm, OrganisationForm
from .markers import build_map_markers
from .models import Category, Organisation
from .policy import PERMISSION_DENIED, Action, Decision, decide

logger = logging.getLogger(__name__)

SEARCH_NOT_FOUND = "Sorry, it seems we don't quite have what you are looking for."


def _paginate(request, queryset):
    paginator = Paginator(queryset, settings.ORGANISATIONS_PER_PAGE)
    return paginator.get_page(request.GET.get("page"))


def _page_query(request):
    """The current query string without `page`, for the pagination links."""
    params = request.GET.copy()
    params.pop("page", None)
    return params.urlencode()


def _listing_context(request, page):
    return {
        "organisations": page,
        "page_query": _page_query(request),
        "markers": build_map_markers(page.object_list),
        "category_options": Category.objects.html_drop_down_options(),
    }


def _refuse(request, action, decision, pk=None):
    if decision is Decision.SIGN_IN:
        return redirect_to_login(request.get_full_path())
    logger.info("Refused %s on organisation %s for user %s", action.value, pk, request.user.pk)
    if decision.notice:
        messages.info(request, PERMISSION_DENIED)
    if decision.redirect_to == "index":
        return redirect("organisations:index")
    return redirect("organisations:show", pk=pk)


def _authorize(request, action, organisation=None, pk=None):
    """None when the request may proceed, otherwise the refusal response."""
    decision = decide(action, request.user, organisation)
    if decision.allowed:
        return None
    return _refuse(request, action, decision, pk)


@require_http_methods(["GET", "POST"])
def collection(request):
    if request.method == "POST":
        return create(request)
    return index(request)


@require_http_methods(["GET", "POST"])
def member(request, pk):
    if request.method == "POST":
        return update(request, pk)
    return show(request, pk)


def index(request):
    page = _paginate(request, Organisation.objects.order_by_most_recent())
    return render(request, "organisations/index.html", _listing_context(request, page))


@require_GET
def search(request):
    query_term = request.GET.get("q")
    # "" is a real value here, distinct from no category at all
    category_id = request.GET.get("category_id")

    results = (
        Organisation.objects.order_by_most_recent()
        .search_by_keyword(query_term)
        .filter_by_category(category_id)
    )
    page = _paginate(request, results)

    context = _listing_context(request, page)
    context["query_term"] = query_term
    context["category"] = Category.objects.find_by_id(category_id) if category_id is not None else None
    # one-shot notice: part of this response only, never stored
    context["alert"] = SEARCH_NOT_FOUND if page.paginator.count == 0 else None
    return render(request, "organisations/index.html", context)


def show(request, pk):
    organisation = get_object_or_404(Organisation, pk=pk)
    user = request.user
    context = {
        "organisation": organisation,
        "markers": build_map_markers(organisation),
    }
    if user.is_authenticated:
        context.update(
            editable=permissions.can_edit(user, organisation),
            deletable=permissions.can_delete(user, organisation),
            pending_admin=permissions.is_pending_admin(user, organisation),
            grabbable=permissions.can_request_org_admin(user, organisation),
            can_create_volunteer_op=permissions.can_create_volunteer_ops(user, organisation),
        )
    else:
        # anonymous visitors are offered the "this is my organisation" link
        context.update(
            editable=False,
            deletable=False,
            pending_admin=False,
            grabbable=True,
            can_create_volunteer_op=None,
        )
    return render(request, "organisations/show.html", context)


@require_GET
def new(request):
    refusal = _authorize(request, Action.NEW)
    if refusal:
        return refusal
    form = OrganisationForm()
    return render(request, "organisations/new.html", {"form": form, "organisation": form.instance})


def create(request):
    refusal = _authorize(request, Action.CREATE)
    if refusal:
        return refusal
    form = OrganisationForm(request.POST)
    if form.is_valid():
        organisation = form.save()
        logger.info("Organisation %s created by user %s", organisation.pk, request.user.pk)
        messages.success(request, "Organisation was successfully created.")
        return redirect(organisation)
    return render(request, "organisations/new.html", {"form": form, "organisation": form.instance})


@require_GET
def edit(request, pk):
    organisation = Organisation.objects.filter(pk=pk).first()
    refusal = _authorize(request, Action.EDIT, organisation, pk)
    if refusal:
        return refusal
    form = OrganisationEditForm(instance=organisation)
    return render(request, "organisations/edit.html", {"form": form, "organisation": organisation})


def update(request, pk):
    organisation = Organisation.objects.filter(pk=pk).first()
    refusal = _authorize(request, Action.UPDATE, organisation, pk)
    if refusal:
        return refusal
    form = OrganisationEditForm(request.POST, instance=organisation)
    if form.is_valid():
        if organisation.update_with_admin(form.to_update()):
            logger.info("Organisation %s updated by user %s", organisation.pk, request.user.pk)
            messages.success(request, "Organisation was successfully updated.")
            return redirect(organisation)
        for error in organisation.admin_errors:
            form.add_error("admin_email_to_add", error)
    return render(request, "organisations/edit.html", {"form": form, "organisation": organisation})


@require_POST
def destroy(request, pk):
    refusal = _authorize(request, Action.DESTROY, pk=pk)
    if refusal:
        return refusal
    organisation = get_object_or_404(Organisation, pk=pk)
    organisation.delete()
    logger.info("Organisation %s deleted by user %s", pk, request.user.pk)
    messages.success(request, "Deleted %s" % organisation.name)
    return redirect("organisations:index")


@require_POST
def grab(request, pk):
    organisation = Organisation.objects.filter(pk=pk).first()
    refusal = _authorize(request, Action.GRAB, organisation, pk)
    if refusal:
        return refusal
    profile = request.user.profile
    profile.pending_organisation = organisation
    profile.save(update_fields=["pending_organisation"])
    logger.info("User %s asked to administer organisation %s", request.user.pk, organisation.pk)
    messages.info(request, "You have requested admin status for %s" % organisation.name)
    return redirect(organisation)
