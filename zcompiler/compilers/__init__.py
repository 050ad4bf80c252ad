"""Target compilers for Next.js, SwiftUI, Rust and Tauri, and their lookup by target type."""