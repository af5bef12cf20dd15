"""Post commands."""

from quill.application.commands.post.create_post_command import CreatePostCommand
from quill.application.commands.post.delete_post_command import DeletePostCommand
from quill.application.commands.post.update_post_command import UpdatePostCommand

__all__ = ["CreatePostCommand", "DeletePostCommand", "UpdatePostCommand"]
