from .AwsIdentity import AwsIdentity, AwsIdentityError
from .Tag import Tag
from .TagDelta import TagDelta
from .TagRunResult import TagRunResult
from .TagSet import TagSet

__all__ = ["AwsIdentity", "AwsIdentityError", "Tag", "TagDelta", "TagRunResult", "TagSet"]
