from kova.messages.message import Message, ResourceMessage, TextMessage
from kova.messages.resolver import MessageResolver, default_resolver

__all__ = ["Message", "TextMessage", "ResourceMessage", "MessageResolver", "default_resolver"]
