from app.domain.repositories_interfaces.document_store import DocumentStoreInterface
from app.domain.repositories_interfaces.song_repo import SongRepoInterface
from app.domain.repositories_interfaces.playlist_repo import PlaylistRepoInterface
from app.domain.repositories_interfaces.tag_repo import TagRepoInterface
from infrastructure.repositories.reference_repo import ReferenceRepo
from infrastructure.repositories.tag.document_repo import DocumentTagRepo
from infrastructure.repositories.song.document_repo import DocumentSongRepo
from infrastructure.repositories.playlist.document_repo import DocumentPlaylistRepo


# Repository service that contains all repositories, handed to handlers by the repo middleware.
class RepoService:
    def __init__(self, song_repo: SongRepoInterface, playlist_repo: PlaylistRepoInterface,
                 tag_repo: TagRepoInterface):
        self.song_repo = song_repo
        self.playlist_repo = playlist_repo
        self.tag_repo = tag_repo

    @classmethod
    def from_store(cls, store: DocumentStoreInterface) -> 'RepoService':
        # Songs and playlists share the reference repo, playlists read songs, songs read tags
        reference_repo = ReferenceRepo(store)
        tag_repo = DocumentTagRepo(store)
        song_repo = DocumentSongRepo(store, tag_repo, reference_repo)
        playlist_repo = DocumentPlaylistRepo(store, song_repo, reference_repo)
        return cls(song_repo=song_repo, playlist_repo=playlist_repo, tag_repo=tag_repo)
