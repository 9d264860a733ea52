"""Well-known annotation keys set on platform objects."""

# Display name for objects
DISPLAY_NAME_ANNOTATION_KEY = "cpaas.io/displayName"
# Creation, update and deletion times
CREATED_TIME_ANNOTATION_KEY = "cpaas.io/creationTime"
UPDATED_TIME_ANNOTATION_KEY = "cpaas.io/updateTime"
DELETED_TIME_ANNOTATION_KEY = "cpaas.io/deletionTime"

# Namespace of objects
NAMESPACE_ANNOTATION_KEY = "cpaas.io/namespace"

# Usernames that created, updated or deleted the resource
CREATED_BY_ANNOTATION_KEY = "cpaas.io/createdBy"
UPDATED_BY_ANNOTATION_KEY = "cpaas.io/updatedBy"
DELETED_BY_ANNOTATION_KEY = "cpaas.io/deletedBy"

# UI descriptors stored on resources
UI_DESCRIPTORS_ANNOTATION_KEY = "ui.cpaas.io/descriptors"
