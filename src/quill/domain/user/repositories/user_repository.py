"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union

from quill.domain.user.aggregates.user import User
from quill.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find a user by their provider-issued ID.

        Parameters
        ----------
        user_id
            The user's opaque identifier

        Returns
        -------
        User if found, None otherwise
        """

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """
        Find a user by their email address.

        Raises
        ------
        InvalidEmailError
            If email format is invalid
        """

    @abstractmethod
    async def save(self, user: User) -> None:
        """
        Save or update a user.

        If the user exists (by ID), updates it.
        If the user doesn't exist, creates it.

        Raises
        ------
        EmailAlreadyExistsError
            If email is already in use by another user
        """

    @abstractmethod
    async def delete(self, user_id: str) -> None:
        """
        Delete a user by ID.

        Posts owned by the user are removed by the database cascade.
        """
