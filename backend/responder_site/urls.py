"""Root URL configuration for the responder example site."""
from django.urls import path

from . import views

urlpatterns = [
    path('health', views.health, name='health'),
    path('jobs', views.submit_job, name='submit-job'),
    path('orders/<str:order_id>', views.order_detail, name='order-detail'),
    path('orders/<str:order_id>/approve', views.approve_order, name='approve-order'),
    path('upstream', views.upstream, name='upstream'),
    path('crash', views.crash, name='crash'),
    path('legacy', views.legacy, name='legacy'),
]
