from fastapi import Depends

from folio.repos.posts_repo import FilePostsRepo
from folio.services.posts_service import PostsService
from folio.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilePostsRepo(
        posts_dir=current_settings.posts_path,
        extension=current_settings.POST_EXTENSION,
    )


def get_posts_service(
    repo=Depends(get_posts_repo),
    current_settings: Settings = Depends(get_settings),
):
    return PostsService(repo=repo, asset_root=current_settings.ASSET_ROOT)
