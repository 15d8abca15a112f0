"""
Core application engine for the scrape, resolve, extract and download pipeline.

`ShowLister` walks the collection listing, `ShowResolver` maps a show name to
an archive item (using `extract_tracks` on its detail page) and the
`DownloadManager` writes the tracks of one or many shows to disk.
"""
