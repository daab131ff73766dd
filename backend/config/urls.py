from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('core.urls')),
    path('api/user/', include('user.urls')),
    # Trail cards are served by the recommendations app under the trails prefix
    path('api/trails/', include('recommendations.urls')),
    path('api/trails/', include('trails.urls')),
    path('api/', include('swipes.urls')),
    path('api/friends/', include('community.urls')),
]
