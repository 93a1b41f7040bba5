"""
Org Auth Library - REST API 路由

在项目 urls.py 中:
    path('', include('org_auth.api.urls'))
"""

from django.urls import path

from . import views


app_name = 'org_auth'

urlpatterns = [
    # 认证接口
    path('auth/register', views.register, name='auth-register'),  # POST
    path('auth/login', views.login, name='auth-login'),  # POST

    # 用户接口
    path('api/users/<str:user_id>', views.user_detail, name='user-detail'),  # GET

    # 组织接口
    path('api/organisations', views.organisations, name='organisations'),  # GET / POST
    path('api/organisations/<str:org_id>', views.organisation_detail, name='organisation-detail'),  # GET
    path('api/organisations/<str:org_id>/users', views.organisation_add_user, name='organisation-add-user'),  # POST
]
