from django.urls import path
from .views import (
    ClientListCreateView, ClientDetailView,
    ProjectListCreateView, ProjectDetailView,
    ProjectContactListView, ContactCreateView, ContactDetailView,
    ProductListCreateView, ProductGroupedView, ProductDetailView,
)


# api/projects/
urlpatterns = [
    path('clients/', ClientListCreateView.as_view(), name='client-list'),
    path('clients/<int:client_id>/', ClientDetailView.as_view(), name='client-detail'),

    path('contacts/', ContactCreateView.as_view(), name='contact-create'),
    path('contacts/<int:contact_id>/', ContactDetailView.as_view(), name='contact-detail'),

    path('', ProjectListCreateView.as_view(), name='project-list'),
    path('<int:project_id>/', ProjectDetailView.as_view(), name='project-detail'),
    path('<int:project_id>/contacts/', ProjectContactListView.as_view(), name='project-contacts'),
]

# api/products/
product_urlpatterns = [
    path('', ProductListCreateView.as_view(), name='product-list'),
    path('grouped/', ProductGroupedView.as_view(), name='product-grouped'),
    path('<int:product_id>/', ProductDetailView.as_view(), name='product-detail'),
]
