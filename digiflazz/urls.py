"""
URL configuration for digiflazz app.
"""

from django.urls import path
from . import views

app_name = 'digiflazz'

urlpatterns = [
    path('callback/', views.webhook_callback, name='webhook_callback'),
]
