from recipes.services import RecipeService


class PageContextMixin:
    """ListAPIView helper whose serializer context depends on the current page.

    Subclasses override `page_items` to map paginated rows to the objects
    being serialized and `page_context` to add per-page lookups such as
    liked recipe ids.
    """

    def page_items(self, page):
        return page

    def page_context(self, items):
        return {}

    def list(self, request, *args, **kwargs):
        page = self.paginate_queryset(self.filter_queryset(self.get_queryset()))
        items = self.page_items(page)
        context = {**self.get_serializer_context(), **self.page_context(items)}
        serializer = self.get_serializer(items, many=True, context=context)
        return self.get_paginated_response(serializer.data)


class RecipePageMixin(PageContextMixin):
    """Mark which recipes of the page the viewer has liked."""

    def page_context(self, items):
        return {"liked_ids": RecipeService().liked_ids(self.request.user, items)}
