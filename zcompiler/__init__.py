"""Z language compiler that generates Next.js, SwiftUI, Rust and Tauri projects."""

__version__ = "0.1.0"