# Names of the document store collections
SONGS = 'songs'
PLAYLISTS = 'playlists'
TAGS = 'tags'

# Entity names used in error messages
ENTITY_NAMES = {
    SONGS: 'Song',
    PLAYLISTS: 'Playlist',
    TAGS: 'Tag',
}

# Wire fields holding references to other collections
SONG_IDS_FIELD = 'songIds'
TAG_IDS_FIELD = 'tagIds'
