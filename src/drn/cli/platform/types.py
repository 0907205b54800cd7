"""Data types for registry API contracts."""

from pydantic import BaseModel


class PackageManifest(BaseModel):
    """Package manifest stored in drn.json.

    Field order is the key order written to disk.
    """

    name: str
    version: str = "1.0.0"
    description: str = ""
    main: str = "index.js"


class UserProfile(BaseModel):
    """Account behind an API key."""

    username: str
    email: str


class ChatReply(BaseModel):
    """Response from the chat endpoint."""

    reply: str


class PublishResponse(BaseModel):
    """Response from the publish endpoint."""

    message: str
