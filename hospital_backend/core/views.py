"""Core app views.

Contains:
- health: Health check endpoint (both database aliases)
- LoginView: JWT token obtain with user/role info
- RefreshView: JWT token refresh
- MeView: Current authenticated user info
"""

import logging

from django.db import DatabaseError, connections
from django.http import JsonResponse

from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from hospital_backend.core.serializers import (
    LoginSerializer,
    RefreshSerializer,
    RoleSerializer,
    UserMeSerializer,
)

logger = logging.getLogger(__name__)


def health(request):
    """Health check endpoint - no authentication required."""
    checks = {}
    healthy = True
    for alias in ('default', 'records'):
        try:
            with connections[alias].cursor() as cursor:
                cursor.execute('SELECT 1;')
            checks[alias] = 'ok'
        except DatabaseError as exc:
            logger.warning('Health check failed for database %s: %s', alias, exc)
            checks[alias] = 'error'
            healthy = False

    return JsonResponse(
        {'status': 'ok' if healthy else 'error', 'databases': checks},
        status=200 if healthy else 503,
    )


class LoginView(APIView):
    """Obtain JWT access and refresh tokens.

    POST /api/auth/login/
    Body: {"username": "...", "password": "..."}
    Returns: {"user": {...}, "access": "...", "refresh": "..."}
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request, *args, **kwargs):
        serializer = LoginSerializer(data=request.data, context={'request': request})
        serializer.is_valid(raise_exception=True)

        user = serializer.validated_data['user']
        refresh = RefreshToken.for_user(user)

        role = getattr(user, 'role', None)
        refresh['role'] = role.name if role else None

        return Response(
            {
                'user': {
                    'id': user.id,
                    'username': user.username,
                    'email': user.email,
                    'first_name': user.first_name,
                    'last_name': user.last_name,
                    'role': RoleSerializer(role).data if role else None,
                },
                'access': str(refresh.access_token),
                'refresh': str(refresh),
            },
            status=status.HTTP_200_OK,
        )


class RefreshView(APIView):
    """Refresh JWT access token.

    POST /api/auth/refresh/
    Body: {"refresh": "..."}
    Returns: {"access": "..."}
    """

    permission_classes = [AllowAny]

    def post(self, request, *args, **kwargs):
        serializer = RefreshSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            refresh = RefreshToken(serializer.validated_data['refresh'])
        except TokenError as exc:
            raise AuthenticationFailed(str(exc)) from exc

        return Response({'access': str(refresh.access_token)}, status=status.HTTP_200_OK)


class MeView(APIView):
    """Get current authenticated user info.

    GET /api/auth/me/
    """

    permission_classes = [IsAuthenticated]

    def get(self, request, *args, **kwargs):
        return Response(UserMeSerializer(request.user).data, status=status.HTTP_200_OK)
