"""Infrastructure services shared by the SOM core."""
