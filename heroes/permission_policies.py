from django.utils.functional import cached_property

from heroes.coreutils import resolve_model_string


class BasePermissionPolicy:
    """
    Answers every "may this user do X to this model?" question for one model,
    so views only need to hold a policy object instead of carrying their own
    permission logic.

    Actions are plain strings such as 'add', 'change', 'delete' or 'view'.
    """

    def __init__(self, model):
        self._model_or_name = model

    @cached_property
    def model(self):
        return resolve_model_string(self._model_or_name)

    def user_has_permission(self, user, action):
        raise NotImplementedError

    def user_has_any_permission(self, user, actions):
        return any(self.user_has_permission(user, action) for action in actions)


class AuthenticationOnlyPermissionPolicy(BasePermissionPolicy):
    """
    Lets any active, logged-in user perform every action.
    """

    def user_has_permission(self, user, action):
        return user.is_authenticated and user.is_active


class PermissionArrayPolicy(BasePermissionPolicy):
    """
    A permission policy for admin users carrying a list of permission keys.
    A user holding ``permission`` (or the ``all`` wildcard, or the super admin
    role) may perform every action on the model; anyone else may perform none.
    """

    def __init__(self, model, permission):
        super().__init__(model)
        self.permission = permission

    def user_has_permission(self, user, action):
        if not (user.is_authenticated and user.is_active):
            return False
        return user.has_permission(self.permission)
